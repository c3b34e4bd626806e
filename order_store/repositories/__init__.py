"""
Repositories package
"""
from order_store.repositories.customer_repository import CustomerRepository
from order_store.repositories.product_repository import ProductRepository
from order_store.repositories.order_repository import OrderRepository
from order_store.repositories.report_repository import ReportRepository
from order_store.repositories.archive_repository import ArchiveRepository

__all__ = [
    "CustomerRepository",
    "ProductRepository",
    "OrderRepository",
    "ReportRepository",
    "ArchiveRepository",
]
