"""
SQLAlchemy archive models

Same columns, keys and checks as orders / order_items, without foreign keys
back to the live tables: archived rows outlive the customers and products
they were placed against.
"""
from sqlalchemy import Column, Integer, Date, Numeric, CheckConstraint

from order_store.database import Base
from order_store.models.order import order_status_type


class OrderArchive(Base):
    """Archived order row"""
    
    __tablename__ = "orders_archive"
    
    id = Column(Integer, primary_key=True, autoincrement=False)
    customer_id = Column(Integer, nullable=False)
    order_date = Column(Date, nullable=False)
    ship_date = Column(Date, nullable=False)
    status = Column(order_status_type, nullable=False)
    
    def __repr__(self):
        return f"<OrderArchive(id={self.id}, order_date={self.order_date})>"


class OrderItemArchive(Base):
    """Archived order line item"""
    
    __tablename__ = "order_items_archive"
    
    order_id = Column(Integer, primary_key=True, autoincrement=False)
    product_id = Column(Integer, primary_key=True, autoincrement=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    
    __table_args__ = (
        CheckConstraint("quantity > 0", name="check_archived_quantity_positive"),
        CheckConstraint("unit_price >= 0", name="check_archived_unit_price_non_negative"),
    )
    
    def __repr__(self):
        return f"<OrderItemArchive(order_id={self.order_id}, product_id={self.product_id})>"
