"""
Pydantic schemas for products
"""
from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class ProductBase(BaseModel):
    """Base Product schema with common fields"""
    name: str = Field(..., min_length=1, max_length=100, description="Product name")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Current price (non-negative)")
    category: str = Field(..., min_length=1, max_length=100, description="Product category")


class ProductCreate(ProductBase):
    """Schema for creating a new product"""
    pass


class ProductUpdate(BaseModel):
    """Schema for updating a product (all fields optional)"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    category: Optional[str] = Field(None, min_length=1, max_length=100)


class ProductResponse(ProductBase):
    """Schema for product response"""
    id: int
    
    model_config = ConfigDict(from_attributes=True)


class ProductListResponse(BaseModel):
    """Schema for list of products response"""
    products: list[ProductResponse]
    total: int
