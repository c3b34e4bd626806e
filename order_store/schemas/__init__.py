"""
Schemas package
"""
from order_store.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
    CustomerListResponse,
)
from order_store.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse,
)
from order_store.schemas.order import (
    OrderItemCreate,
    OrderItemResponse,
    OrderCreate,
    OrderItemQuantityUpdate,
    OrderStatusUpdate,
    OrderResponse,
    OrderListResponse,
    OrderSummaryResponse,
)
from order_store.schemas.report import CustomerSpendRow, ProductFrequencyRow, OrderTotalRow
from order_store.schemas.archive import ArchiveResult, ArchivedOrderResponse, ArchivedItemResponse

__all__ = [
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    "CustomerListResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductListResponse",
    "OrderItemCreate",
    "OrderItemResponse",
    "OrderCreate",
    "OrderItemQuantityUpdate",
    "OrderStatusUpdate",
    "OrderResponse",
    "OrderListResponse",
    "OrderSummaryResponse",
    "CustomerSpendRow",
    "ProductFrequencyRow",
    "OrderTotalRow",
    "ArchiveResult",
    "ArchivedOrderResponse",
    "ArchivedItemResponse",
]
