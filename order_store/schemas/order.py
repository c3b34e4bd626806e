"""
Pydantic schemas for orders, order items and order summaries
"""
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict, model_validator
from typing import Optional

from order_store.models.order import OrderStatus


class OrderItemCreate(BaseModel):
    """Schema for one line of a new order"""
    product_id: int = Field(..., gt=0, description="Product ID")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: Optional[Decimal] = Field(
        None,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="Price per unit; defaults to the product's current price",
    )


class OrderItemResponse(BaseModel):
    """Schema for order item response"""
    order_id: int
    product_id: int
    quantity: int
    unit_price: Decimal
    
    model_config = ConfigDict(from_attributes=True)


class OrderCreate(BaseModel):
    """Schema for creating a new order with its items"""
    customer_id: int = Field(..., gt=0, description="Owning customer ID")
    order_date: date = Field(..., description="Date the order was placed")
    ship_date: date = Field(..., description="Date the order ships")
    status: OrderStatus = Field(OrderStatus.IN_PROCESSING, description="Initial status")
    items: list[OrderItemCreate] = Field(default_factory=list)
    
    @model_validator(mode="after")
    def one_line_per_product(self):
        product_ids = [item.product_id for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValueError("an order may contain at most one line per product")
        return self


class OrderItemQuantityUpdate(BaseModel):
    """Schema for changing the quantity of an order line"""
    quantity: int = Field(..., gt=0, description="Quantity ordered")


class OrderStatusUpdate(BaseModel):
    """Schema for updating order status"""
    status: OrderStatus = Field(..., description="Order status")


class OrderResponse(BaseModel):
    """Schema for order response"""
    id: int
    customer_id: int
    order_date: date
    ship_date: date
    status: OrderStatus
    items: list[OrderItemResponse] = []
    
    model_config = ConfigDict(from_attributes=True)


class OrderListResponse(BaseModel):
    """Schema for list of orders response"""
    orders: list[OrderResponse]
    total: int


class OrderSummaryResponse(BaseModel):
    """Row of the order summary view"""
    order_id: int
    order_date: date
    status: OrderStatus
    order_total: Decimal
    
    model_config = ConfigDict(from_attributes=True)
