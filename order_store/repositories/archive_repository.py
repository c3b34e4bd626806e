"""
Archive Repository - moves orders and items between live and archive tables

None of these methods commit; the caller owns the transaction.
"""
from datetime import date
from typing import List, Optional, Sequence

from sqlalchemy import delete, insert, select

from order_store.models.archive import OrderArchive, OrderItemArchive
from order_store.models.order import Order, OrderItem
from order_store.repositories.base import BaseRepository

_ITEM_COLUMNS = ("order_id", "product_id", "quantity", "unit_price")
_ORDER_COLUMNS = ("id", "customer_id", "order_date", "ship_date", "status")


class ArchiveRepository(BaseRepository):
    """Repository for archive tables"""
    
    def lock_orders_before(self, cutoff: date) -> List[int]:
        """Select and row-lock the ids of live orders dated before the cutoff"""
        stmt = (
            select(Order.id)
            .where(Order.order_date < cutoff)
            .order_by(Order.id)
            .with_for_update()
        )
        return list(self.db.execute(stmt).scalars())
    
    def copy_items(self, order_ids: Sequence[int]) -> int:
        live = OrderItem.__table__
        stmt = insert(OrderItemArchive.__table__).from_select(
            _ITEM_COLUMNS,
            select(*(live.c[name] for name in _ITEM_COLUMNS)).where(live.c.order_id.in_(order_ids)),
        )
        return self.db.execute(stmt).rowcount
    
    def delete_items(self, order_ids: Sequence[int]) -> int:
        live = OrderItem.__table__
        return self.db.execute(delete(live).where(live.c.order_id.in_(order_ids))).rowcount
    
    def copy_orders(self, order_ids: Sequence[int]) -> int:
        live = Order.__table__
        stmt = insert(OrderArchive.__table__).from_select(
            _ORDER_COLUMNS,
            select(*(live.c[name] for name in _ORDER_COLUMNS)).where(live.c.id.in_(order_ids)),
        )
        return self.db.execute(stmt).rowcount
    
    def delete_orders(self, order_ids: Sequence[int]) -> int:
        live = Order.__table__
        return self.db.execute(delete(live).where(live.c.id.in_(order_ids))).rowcount
    
    # Reads
    
    def get_orders(self, skip: int = 0, limit: int = 100) -> List[OrderArchive]:
        """Get archived orders with pagination, oldest first"""
        return self.db.query(OrderArchive).order_by(
            OrderArchive.order_date, OrderArchive.id
        ).offset(skip).limit(limit).all()
    
    def get_order(self, order_id: int) -> Optional[OrderArchive]:
        return self.db.query(OrderArchive).filter(OrderArchive.id == order_id).first()
    
    def get_items(self, order_id: int) -> List[OrderItemArchive]:
        return self.db.query(OrderItemArchive).filter(
            OrderItemArchive.order_id == order_id
        ).order_by(OrderItemArchive.product_id).all()
