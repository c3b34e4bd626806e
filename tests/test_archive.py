"""
Tests for moving aged orders and their items to the archive tables.
"""
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from order_store.exceptions import ArchiveError
from order_store.models.archive import OrderArchive, OrderItemArchive
from order_store.models.order import Order, OrderItem, OrderStatus
from order_store.models.product import Product
from order_store.schemas.order import OrderCreate, OrderItemCreate
from order_store.services.archive_service import ArchiveService, default_cutoff
from order_store.services.order_service import OrderService


@pytest.fixture
def archive(seeded):
    return ArchiveService(seeded)


def _live_order_ids(db):
    return sorted(o.id for o in db.query(Order).all())


def _assert_no_split_orders(db):
    """Every item sits in the same place (live or archive) as its order."""
    live_orders = {o.id for o in db.query(Order).all()}
    archived_orders = {o.id for o in db.query(OrderArchive).all()}
    
    assert {i.order_id for i in db.query(OrderItem).all()} <= live_orders
    assert {i.order_id for i in db.query(OrderItemArchive).all()} <= archived_orders
    assert not live_orders & archived_orders


def test_archives_order_and_its_items(seeded, archive):
    """Only order 1 (2025-06-01) precedes the cutoff."""
    result = archive.archive_orders_before(date(2025, 6, 10))
    
    assert (result.orders_archived, result.items_archived) == (1, 2)
    assert _live_order_ids(seeded) == [2, 3]
    
    archived = archive.list_archived_orders()
    assert [(o.id, o.customer_id, o.order_date, o.status) for o in archived] == [
        (1, 1, date(2025, 6, 1), OrderStatus.COMPLETED)
    ]
    assert [(i.product_id, i.quantity, i.unit_price) for i in archive.get_archived_items(1)] == [
        (1, 1, Decimal("2499.99")),
        (2, 2, Decimal("199.00")),
    ]
    assert seeded.query(OrderItem).filter(OrderItem.order_id == 1).count() == 0
    _assert_no_split_orders(seeded)


def test_cutoff_is_exclusive(seeded, archive):
    """An order dated on the cutoff stays live."""
    result = archive.archive_orders_before(date(2025, 6, 15))
    
    assert result.orders_archived == 1
    assert _live_order_ids(seeded) == [2, 3]


def test_july_cutoff_archives_both_june_orders(seeded, archive):
    result = archive.archive_orders_before(date(2025, 7, 1))
    
    assert (result.orders_archived, result.items_archived) == (2, 4)
    assert _live_order_ids(seeded) == [3]
    assert seeded.query(OrderItem).count() == 1
    _assert_no_split_orders(seeded)


def test_second_run_is_a_no_op(seeded, archive):
    archive.archive_orders_before(date(2025, 7, 1))
    result = archive.archive_orders_before(date(2025, 7, 1))
    
    assert (result.orders_archived, result.items_archived) == (0, 0)
    assert seeded.query(OrderArchive).count() == 2
    assert seeded.query(OrderItemArchive).count() == 4


def test_nothing_eligible(seeded, archive):
    result = archive.archive_orders_before(date(2025, 1, 1))
    
    assert result.orders_archived == 0
    assert _live_order_ids(seeded) == [1, 2, 3]


def test_order_without_items_is_archived(seeded, archive):
    order = OrderService(seeded).create_order(
        OrderCreate(customer_id=3, order_date=date(2024, 12, 1), ship_date=date(2024, 12, 2))
    )
    
    result = archive.archive_orders_before(date(2025, 1, 1))
    
    assert (result.orders_archived, result.items_archived) == (1, 0)
    assert [o.id for o in archive.list_archived_orders()] == [order.id]


def test_get_archived_order(seeded, archive):
    archive.archive_orders_before(date(2025, 6, 10))
    
    order = archive.get_archived_order(1)
    assert (order.customer_id, order.ship_date, order.status) == (1, date(2025, 6, 2), OrderStatus.COMPLETED)
    assert archive.get_archived_order(2) is None


def test_archived_orders_leave_the_summary_view(seeded, archive):
    archive.archive_orders_before(date(2025, 6, 10))
    
    assert OrderService(seeded).get_order_summary(1) is None


def test_archived_ids_are_not_reused(seeded, archive):
    """New orders never take the id of an archived one."""
    archive.archive_orders_before(date(2026, 1, 1))
    
    order = OrderService(seeded).create_order(
        OrderCreate(
            customer_id=2,
            order_date=date(2026, 2, 1),
            ship_date=date(2026, 2, 3),
            items=[OrderItemCreate(product_id=1, quantity=1)],
        )
    )
    
    assert order.id == 4
    archive.archive_orders_before(date(2026, 3, 1))
    assert [o.id for o in archive.list_archived_orders()] == [1, 2, 3, 4]


def test_archived_rows_outlive_their_products(seeded, archive):
    """Archive tables hold no foreign keys to live tables."""
    archive.archive_orders_before(date(2025, 6, 10))
    seeded.query(Product).filter(Product.id == 1).delete()
    seeded.commit()
    
    assert [i.product_id for i in archive.get_archived_items(1)] == [1, 2]


def test_failure_rolls_everything_back(seeded, archive, monkeypatch):
    """A failing step leaves live and archive tables as they were."""
    def fail(order_ids):
        raise OperationalError("DELETE FROM orders", {}, Exception("database is locked"))
    
    monkeypatch.setattr(archive.repository, "delete_orders", fail)
    
    with pytest.raises(ArchiveError) as exc_info:
        archive.archive_orders_before(date(2025, 7, 1))
    
    assert isinstance(exc_info.value.__cause__, OperationalError)
    assert _live_order_ids(seeded) == [1, 2, 3]
    assert seeded.query(OrderItem).count() == 5
    assert seeded.query(OrderArchive).count() == 0
    assert seeded.query(OrderItemArchive).count() == 0


def test_mismatched_move_is_rolled_back(seeded, archive, monkeypatch):
    """Copy and delete counts must agree or nothing is moved."""
    monkeypatch.setattr(archive.repository, "copy_items", lambda order_ids: 0)
    
    with pytest.raises(ArchiveError):
        archive.archive_orders_before(date(2025, 7, 1))
    
    assert seeded.query(OrderItem).count() == 5
    assert seeded.query(OrderArchive).count() == 0


@pytest.mark.parametrize("today, expected", [
    (date(2026, 10, 19), date(2025, 10, 19)),
    (date(2025, 1, 1), date(2024, 1, 1)),
    (date(2024, 2, 29), date(2023, 2, 28)),
])
def test_default_cutoff(today, expected):
    assert default_cutoff(today) == expected
