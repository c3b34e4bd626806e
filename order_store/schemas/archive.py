"""
Pydantic schemas for the archive
"""
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, ConfigDict

from order_store.models.order import OrderStatus


class ArchiveResult(BaseModel):
    """Outcome of one archiving run"""
    cutoff: date
    orders_archived: int
    items_archived: int


class ArchivedOrderResponse(BaseModel):
    """Schema for archived order response"""
    id: int
    customer_id: int
    order_date: date
    ship_date: date
    status: OrderStatus
    
    model_config = ConfigDict(from_attributes=True)


class ArchivedItemResponse(BaseModel):
    """Schema for archived order item response"""
    order_id: int
    product_id: int
    quantity: int
    unit_price: Decimal
    
    model_config = ConfigDict(from_attributes=True)
