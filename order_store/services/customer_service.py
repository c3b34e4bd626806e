"""
Customer Service - Business Logic Layer
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session

from order_store.repositories.customer_repository import CustomerRepository
from order_store.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
    CustomerListResponse,
)

logger = logging.getLogger(__name__)


class CustomerService:
    """Service layer for customer business logic"""
    
    def __init__(self, db: Session):
        self.repository = CustomerRepository(db)
    
    def list_customers(self, skip: int = 0, limit: int = 100) -> CustomerListResponse:
        """Get all customers with pagination"""
        customers = self.repository.get_all(skip=skip, limit=limit)
        total = self.repository.count()
        
        return CustomerListResponse(
            customers=[CustomerResponse.model_validate(c) for c in customers],
            total=total
        )
    
    def get_customer(self, customer_id: int) -> Optional[CustomerResponse]:
        """Get customer by ID"""
        customer = self.repository.get_by_id(customer_id)
        if not customer:
            return None
        return CustomerResponse.model_validate(customer)
    
    def get_customer_by_email(self, email: str) -> Optional[CustomerResponse]:
        """Get customer by email"""
        customer = self.repository.get_by_email(email)
        if not customer:
            return None
        return CustomerResponse.model_validate(customer)
    
    def create_customer(self, customer_data: CustomerCreate) -> CustomerResponse:
        """
        Create new customer
        
        Raises:
            UniquenessViolationError: If the email is already registered
        """
        customer = self.repository.create(customer_data.model_dump())
        logger.info("Customer created | customer_id=%s country=%s", customer.id, customer.country)
        return CustomerResponse.model_validate(customer)
    
    def update_customer(self, customer_id: int, customer_data: CustomerUpdate) -> Optional[CustomerResponse]:
        """Update existing customer; only provided fields change"""
        customer = self.repository.update(customer_id, customer_data.model_dump(exclude_unset=True))
        if not customer:
            return None
        logger.info("Customer updated | customer_id=%s", customer_id)
        return CustomerResponse.model_validate(customer)
    
    def delete_customer(self, customer_id: int) -> bool:
        """
        Delete customer
        
        Raises:
            ReferentialIntegrityError: If the customer still has orders
        """
        deleted = self.repository.delete(customer_id)
        if deleted:
            logger.info("Customer deleted | customer_id=%s", customer_id)
        return deleted
