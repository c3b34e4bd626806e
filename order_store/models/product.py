"""
SQLAlchemy Product model
"""
from sqlalchemy import Column, Integer, String, Numeric, CheckConstraint, Index

from order_store.database import Base


class Product(Base):
    """Product database model"""
    
    __tablename__ = "products"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    price = Column(Numeric(10, 2), nullable=False)
    name = Column(String(100), nullable=False)
    category = Column(String(100), nullable=False)
    
    # Constraints
    __table_args__ = (
        CheckConstraint("price >= 0", name="check_price_non_negative"),
        Index("idx_product_category", "category"),
    )
    
    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price}, category='{self.category}')>"
