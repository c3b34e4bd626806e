"""
SQLAlchemy Customer model
"""
from sqlalchemy import Column, Integer, String, CHAR, CheckConstraint
from sqlalchemy.orm import relationship

from order_store.database import Base


class Customer(Base):
    """Customer database model"""
    
    __tablename__ = "customers"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(200), nullable=False)
    country = Column(CHAR(2), nullable=False)
    
    # Orders keep customers alive: the database refuses the delete
    orders = relationship("Order", back_populates="customer", passive_deletes="all")
    
    __table_args__ = (
        CheckConstraint("length(country) = 2", name="check_country_code_length"),
    )
    
    def __repr__(self):
        return f"<Customer(id={self.id}, email='{self.email}', country='{self.country}')>"
