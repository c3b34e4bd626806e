"""
Report Service - read-only reporting queries
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session

from order_store.config import settings
from order_store.repositories.report_repository import ReportRepository
from order_store.schemas.report import CustomerSpendRow, ProductFrequencyRow, OrderTotalRow


class ReportService:
    """Service layer for reports; nothing here writes"""
    
    def __init__(self, db: Session):
        self.repository = ReportRepository(db)
    
    def customer_spend(self) -> List[CustomerSpendRow]:
        """Total spent per customer, customers without orders omitted"""
        return [CustomerSpendRow.model_validate(dict(row)) for row in self.repository.customer_spend()]
    
    def product_frequency(self) -> List[ProductFrequencyRow]:
        """How many order lines reference each product, descending"""
        return [ProductFrequencyRow.model_validate(dict(row)) for row in self.repository.product_frequency()]
    
    def count_orders_by_country(self, country: str, start: date, end: date) -> int:
        """
        Count distinct orders from customers of one country placed in a date range
        
        Args:
            country: Two-letter country code
            start: First order_date included
            end: Last order_date included
        """
        return self.repository.count_orders_by_country(country.upper(), start, end)
    
    def orders_over_total(self, threshold: Optional[Decimal] = None) -> List[OrderTotalRow]:
        """Orders whose total exceeds the threshold (settings.ORDER_TOTAL_THRESHOLD by default)"""
        if threshold is None:
            threshold = settings.ORDER_TOTAL_THRESHOLD
        return [OrderTotalRow.model_validate(dict(row)) for row in self.repository.orders_over_total(threshold)]
