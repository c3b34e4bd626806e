"""
Models package
"""
from order_store.models.customer import Customer
from order_store.models.product import Product
from order_store.models.order import Order, OrderItem, OrderStatus, order_status_type
from order_store.models.archive import OrderArchive, OrderItemArchive
from order_store.models.order_summary import order_summaries

__all__ = [
    "Customer",
    "Product",
    "Order",
    "OrderItem",
    "OrderStatus",
    "order_status_type",
    "OrderArchive",
    "OrderItemArchive",
    "order_summaries",
]
