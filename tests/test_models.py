"""
Tests for the schema objects themselves: status lifecycle, indexes, seed data.
"""
from sqlalchemy import inspect

from order_store.models.order import OrderStatus
from order_store.models.order_summary import VIEW_NAME
from order_store.seed import seed_data


def test_status_lifecycle_is_explicit():
    assert OrderStatus.IN_PROCESSING.next_statuses == {OrderStatus.DISPATCHED}
    assert OrderStatus.DISPATCHED.next_statuses == {OrderStatus.COMPLETED}
    assert OrderStatus.COMPLETED.next_statuses == frozenset()


def test_can_transition_to():
    assert OrderStatus.IN_PROCESSING.can_transition_to(OrderStatus.DISPATCHED)
    assert OrderStatus.IN_PROCESSING.can_transition_to(OrderStatus.IN_PROCESSING)
    assert not OrderStatus.IN_PROCESSING.can_transition_to(OrderStatus.COMPLETED)
    assert not OrderStatus.COMPLETED.can_transition_to(OrderStatus.DISPATCHED)


def test_schema_objects_exist(engine):
    inspector = inspect(engine)
    
    assert {"customers", "products", "orders", "order_items",
            "orders_archive", "order_items_archive"} <= set(inspector.get_table_names())
    assert VIEW_NAME in inspector.get_view_names()
    assert "idx_product_category" in {i["name"] for i in inspector.get_indexes("products")}
    assert "idx_order_items_product" in {i["name"] for i in inspector.get_indexes("order_items")}


def test_archive_tables_have_no_foreign_keys(engine):
    inspector = inspect(engine)
    
    assert inspector.get_foreign_keys("orders_archive") == []
    assert inspector.get_foreign_keys("order_items_archive") == []
    assert inspector.get_pk_constraint("order_items_archive")["constrained_columns"] == ["order_id", "product_id"]


def test_order_item_foreign_key_actions(engine):
    with engine.connect() as conn:
        rows = conn.exec_driver_sql("PRAGMA foreign_key_list(order_items)").all()
    
    # columns: id, seq, table, from, to, on_update, on_delete, match
    assert {row[2]: row[6] for row in rows} == {"orders": "CASCADE", "products": "RESTRICT"}


def test_seed_is_idempotent(db):
    assert seed_data(db) is True
    assert seed_data(db) is False
