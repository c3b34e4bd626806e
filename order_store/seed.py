"""
Seed data for a fresh Order Store
"""
import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from order_store.config import configure_logging
from order_store.database import SessionLocal, init_db
from order_store.models.customer import Customer
from order_store.models.order import Order, OrderItem, OrderStatus
from order_store.models.product import Product

logger = logging.getLogger(__name__)


SAMPLE_CUSTOMERS = [
    {"email": "anna@mail.pl", "name": "Anna Nowak", "country": "PL"},
    {"email": "denisp@gmail.com", "name": "Denis Pushkar", "country": "UA"},
    {"email": "chris@uk.co", "name": "Chris Smith", "country": "GB"},
]

SAMPLE_PRODUCTS = [
    {"price": Decimal("2499.99"), "name": 'Laptop Pro 13"', "category": "Electronics"},
    {"price": Decimal("199.00"), "name": "Wireless Headset", "category": "Accessories"},
    {"price": Decimal("79.50"), "name": "Mouse RGB", "category": "Accessories"},
    {"price": Decimal("999.00"), "name": 'Monitor 27"', "category": "Electronics"},
]

# (customer index, order_date, ship_date, status, [(product index, quantity, unit_price)])
SAMPLE_ORDERS = [
    (0, date(2025, 6, 1), date(2025, 6, 2), OrderStatus.COMPLETED,
     [(0, 1, Decimal("2499.99")), (1, 2, Decimal("199.00"))]),
    (0, date(2025, 6, 15), date(2025, 6, 17), OrderStatus.DISPATCHED,
     [(3, 1, Decimal("999.00")), (2, 3, Decimal("79.50"))]),
    (1, date(2025, 7, 3), date(2025, 7, 5), OrderStatus.COMPLETED,
     [(1, 1, Decimal("199.00"))]),
]


def seed_data(db: Session) -> bool:
    """
    Insert the sample customers, products, orders and items
    
    Does nothing when customers already exist.
    
    Returns:
        True if the sample data was inserted
    """
    if db.query(Customer).count():
        logger.info("Customers present; skipping seed")
        return False
    
    customers = [Customer(**c) for c in SAMPLE_CUSTOMERS]
    products = [Product(**p) for p in SAMPLE_PRODUCTS]
    db.add_all(customers + products)
    
    for customer_idx, order_date, ship_date, status, lines in SAMPLE_ORDERS:
        order = Order(
            customer=customers[customer_idx],
            order_date=order_date,
            ship_date=ship_date,
            status=status,
        )
        order.items = [
            OrderItem(product=products[product_idx], quantity=quantity, unit_price=unit_price)
            for product_idx, quantity, unit_price in lines
        ]
        db.add(order)
    
    db.commit()
    logger.info(
        "Seed complete. Added %s customers, %s products, %s orders",
        len(SAMPLE_CUSTOMERS), len(SAMPLE_PRODUCTS), len(SAMPLE_ORDERS)
    )
    return True


def main():
    configure_logging()
    init_db()
    db = SessionLocal()
    try:
        seed_data(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
