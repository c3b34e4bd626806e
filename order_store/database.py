"""
Database engine, session factory and schema management
"""
import logging
import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from order_store.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, future=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with foreign key enforcement switched off
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(bind: Engine = None) -> None:
    """Create tables, indexes and the order summary view"""
    import order_store.models  # noqa: F401  (registers models on Base.metadata)

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("Schema initialized on %s", bind.url.render_as_string(hide_password=True))


def drop_db(bind: Engine = None) -> None:
    """Drop the order summary view and every table"""
    import order_store.models  # noqa: F401

    bind = bind or engine
    Base.metadata.drop_all(bind=bind)
    logger.info("Schema dropped on %s", bind.url.render_as_string(hide_password=True))
