"""
Shared fixtures: in-memory SQLite schema per test, optionally seeded
"""
import os

# Point the module-level engine at SQLite before order_store is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from order_store.database import init_db, drop_db
from order_store.seed import seed_data


@pytest.fixture
def engine():
    """Fresh in-memory database with the full schema"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    """Session bound to the test database"""
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    yield session
    session.close()


@pytest.fixture
def seeded(db):
    """Session over the sample customers, products, orders and items"""
    seed_data(db)
    return db
