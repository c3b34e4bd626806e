"""
Pydantic schemas for customers
"""
from pydantic import BaseModel, Field, EmailStr, ConfigDict, field_validator
from typing import Optional


class CustomerBase(BaseModel):
    """Base Customer schema with common fields"""
    email: EmailStr = Field(..., description="Customer email address (unique)")
    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    country: str = Field(..., pattern=r"^[A-Za-z]{2}$", description="ISO 3166-1 alpha-2 country code")
    
    @field_validator("country")
    @classmethod
    def upper_country(cls, value: str) -> str:
        return value.upper()


class CustomerCreate(CustomerBase):
    """Schema for creating a new customer"""
    pass


class CustomerUpdate(BaseModel):
    """Schema for updating a customer (all fields optional)"""
    email: Optional[EmailStr] = None
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    country: Optional[str] = Field(None, pattern=r"^[A-Za-z]{2}$")
    
    @field_validator("country")
    @classmethod
    def upper_country(cls, value: Optional[str]) -> Optional[str]:
        return value.upper() if value is not None else value


class CustomerResponse(BaseModel):
    """Schema for customer response"""
    id: int
    email: str
    name: str
    country: str
    
    model_config = ConfigDict(from_attributes=True)


class CustomerListResponse(BaseModel):
    """Schema for list of customers response"""
    customers: list[CustomerResponse]
    total: int
