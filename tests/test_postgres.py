"""
Schema and archive behaviour that only PostgreSQL exercises: the view DDL,
the native order_status type and the row locks taken while archiving

Set ORDER_STORE_POSTGRES_URL to a disposable database to run these; the
schema is dropped and recreated there.
"""
import os
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from order_store.database import init_db, drop_db
from order_store.models.order import OrderStatus
from order_store.repositories.archive_repository import ArchiveRepository
from order_store.seed import seed_data
from order_store.services.archive_service import ArchiveService
from order_store.services.order_service import OrderService

POSTGRES_URL = os.environ.get("ORDER_STORE_POSTGRES_URL")

pytestmark = pytest.mark.skipif(not POSTGRES_URL, reason="ORDER_STORE_POSTGRES_URL is not set")


@pytest.fixture
def pg_engine():
    engine = create_engine(POSTGRES_URL)
    drop_db(engine)
    init_db(engine)
    yield engine
    drop_db(engine)
    engine.dispose()


@pytest.fixture
def pg_session_factory(pg_engine):
    return sessionmaker(bind=pg_engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def pg_seeded(pg_session_factory):
    session = pg_session_factory()
    seed_data(session)
    yield session
    session.close()


def test_schema_has_view_and_shared_status_type(pg_engine):
    inspector = inspect(pg_engine)
    
    assert "v_customers_orders" in inspector.get_view_names()
    with pg_engine.connect() as conn:
        labels = conn.execute(text("SELECT unnest(enum_range(NULL::order_status))::text")).scalars().all()
        status_types = conn.execute(text(
            "SELECT table_name, udt_name FROM information_schema.columns "
            "WHERE column_name = 'status' AND table_name IN ('orders', 'orders_archive') "
            "ORDER BY table_name"
        )).all()
    
    assert labels == ["in_processing", "dispatched", "completed"]
    assert [tuple(row) for row in status_types] == [
        ("orders", "order_status"),
        ("orders_archive", "order_status"),
    ]


def test_archive_run(pg_seeded):
    archive = ArchiveService(pg_seeded)
    
    result = archive.archive_orders_before(date(2025, 7, 1))
    
    assert (result.orders_archived, result.items_archived) == (2, 4)
    assert [o.id for o in archive.list_archived_orders()] == [1, 2]
    assert archive.get_archived_order(2).status == OrderStatus.DISPATCHED
    assert [s.order_id for s in OrderService(pg_seeded).list_order_summaries()] == [3]
    assert OrderService(pg_seeded).get_order_summary(3).order_total == Decimal("199.00")


def test_locked_orders_refuse_new_items(pg_seeded, pg_session_factory):
    """While an archive run holds its locks, items cannot be added to those orders."""
    assert ArchiveRepository(pg_seeded).lock_orders_before(date(2025, 6, 10)) == [1]
    
    other = pg_session_factory()
    try:
        other.execute(text("SET LOCAL lock_timeout = '200ms'"))
        with pytest.raises(OperationalError):
            other.execute(text(
                "INSERT INTO order_items (order_id, product_id, quantity, unit_price) "
                "VALUES (1, 3, 1, 79.50)"
            ))
        other.rollback()
    finally:
        other.close()
        pg_seeded.rollback()
    
    assert ArchiveService(pg_seeded).archive_orders_before(date(2025, 6, 10)).items_archived == 2
