"""
Customer Repository - Data Access Layer
"""
from typing import List, Optional

from order_store.models.customer import Customer
from order_store.repositories.base import BaseRepository


class CustomerRepository(BaseRepository):
    """Repository for Customer CRUD operations"""
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Customer]:
        """Get all customers with pagination"""
        return self.db.query(Customer).order_by(Customer.id).offset(skip).limit(limit).all()
    
    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Get customer by ID"""
        return self.db.query(Customer).filter(Customer.id == customer_id).first()
    
    def get_by_email(self, email: str) -> Optional[Customer]:
        """Get customer by email"""
        return self.db.query(Customer).filter(Customer.email == email).first()
    
    def create(self, customer_data: dict) -> Customer:
        """Create new customer"""
        customer = Customer(**customer_data)
        self.db.add(customer)
        self._commit(customer)
        return customer
    
    def update(self, customer_id: int, update_data: dict) -> Optional[Customer]:
        """Update the given fields of an existing customer"""
        customer = self.get_by_id(customer_id)
        if not customer:
            return None
        
        for field, value in update_data.items():
            setattr(customer, field, value)
        
        self._commit(customer)
        return customer
    
    def delete(self, customer_id: int) -> bool:
        """
        Delete customer
        
        Raises:
            ReferentialIntegrityError: If orders still reference the customer
        """
        customer = self.get_by_id(customer_id)
        if not customer:
            return False
        
        self.db.delete(customer)
        self._commit()
        return True
    
    def count(self) -> int:
        """Get total count of customers"""
        return self.db.query(Customer).count()
