"""
SQLAlchemy Order and OrderItem models
"""
import enum

from sqlalchemy import (
    Column,
    Integer,
    Date,
    Numeric,
    Enum,
    ForeignKey,
    CheckConstraint,
    Index,
)
from sqlalchemy.orm import relationship

from order_store.database import Base


class OrderStatus(str, enum.Enum):
    """Lifecycle of an order: in_processing -> dispatched -> completed"""
    
    IN_PROCESSING = "in_processing"
    DISPATCHED = "dispatched"
    COMPLETED = "completed"
    
    @property
    def next_statuses(self) -> frozenset:
        return _TRANSITIONS[self]
    
    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        """Re-applying the current status is allowed and changes nothing"""
        return new_status == self or new_status in _TRANSITIONS[self]


_TRANSITIONS = {
    OrderStatus.IN_PROCESSING: frozenset({OrderStatus.DISPATCHED}),
    OrderStatus.DISPATCHED: frozenset({OrderStatus.COMPLETED}),
    OrderStatus.COMPLETED: frozenset(),
}


def _status_values(enum_cls):
    return [member.value for member in enum_cls]


# Shared by orders and orders_archive; created once per metadata
order_status_type = Enum(
    OrderStatus,
    name="order_status",
    values_callable=_status_values,
    create_constraint=True,
    validate_strings=True,
    metadata=Base.metadata,
)


class Order(Base):
    """Order database model"""
    
    __tablename__ = "orders"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(
        Integer,
        ForeignKey("customers.id", name="fk_orders_customer"),
        nullable=False,
        index=True,
    )
    order_date = Column(Date, nullable=False, index=True)
    ship_date = Column(Date, nullable=False)
    status = Column(
        order_status_type,
        nullable=False,
        default=OrderStatus.IN_PROCESSING,
        server_default=OrderStatus.IN_PROCESSING.value,
    )
    
    customer = relationship("Customer", back_populates="orders")
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderItem.product_id",
    )
    
    # Archived ids must stay unique, so SQLite may not hand a deleted id out again
    __table_args__ = {"sqlite_autoincrement": True}
    
    def __repr__(self):
        return f"<Order(id={self.id}, customer_id={self.customer_id}, order_date={self.order_date}, status='{self.status}')>"


class OrderItem(Base):
    """Order line item: one product, its quantity and the price paid"""
    
    __tablename__ = "order_items"
    
    order_id = Column(
        Integer,
        ForeignKey("orders.id", ondelete="CASCADE", name="fk_order_items_order"),
        primary_key=True,
    )
    product_id = Column(
        Integer,
        ForeignKey("products.id", ondelete="RESTRICT", name="fk_order_items_product"),
        primary_key=True,
    )
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)  # Captured at order time
    
    order = relationship("Order", back_populates="items")
    product = relationship("Product")
    
    # Constraints
    __table_args__ = (
        CheckConstraint("quantity > 0", name="check_quantity_positive"),
        CheckConstraint("unit_price >= 0", name="check_unit_price_non_negative"),
        Index("idx_order_items_product", "product_id"),
    )
    
    def __repr__(self):
        return f"<OrderItem(order_id={self.order_id}, product_id={self.product_id}, quantity={self.quantity}, unit_price={self.unit_price})>"
