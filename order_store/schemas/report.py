"""
Pydantic schemas for reporting query rows
"""
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, ConfigDict


class CustomerSpendRow(BaseModel):
    """Spend per customer"""
    customer_id: int
    customer_name: str
    total_spent: Decimal
    
    model_config = ConfigDict(from_attributes=True)


class ProductFrequencyRow(BaseModel):
    """How many order lines reference a product"""
    product_id: int
    product_name: str
    times_ordered: int
    
    model_config = ConfigDict(from_attributes=True)


class OrderTotalRow(BaseModel):
    """Order whose total crossed the reporting threshold"""
    order_id: int
    order_date: date
    customer_name: str
    order_total: Decimal
    
    model_config = ConfigDict(from_attributes=True)
