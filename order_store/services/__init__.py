"""
Services package
"""
from order_store.services.customer_service import CustomerService
from order_store.services.product_service import ProductService
from order_store.services.order_service import OrderService
from order_store.services.report_service import ReportService
from order_store.services.archive_service import ArchiveService, default_cutoff

__all__ = [
    "CustomerService",
    "ProductService",
    "OrderService",
    "ReportService",
    "ArchiveService",
    "default_cutoff",
]
