"""
Order Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy import desc, select

from order_store.exceptions import UniquenessViolationError
from order_store.models.order import Order, OrderItem, OrderStatus
from order_store.models.order_summary import order_summaries
from order_store.repositories.base import BaseRepository


class OrderRepository(BaseRepository):
    """Repository for Order and OrderItem CRUD operations"""
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Order]:
        """Get all orders with pagination, newest first"""
        return self.db.query(Order).order_by(
            desc(Order.order_date), desc(Order.id)
        ).offset(skip).limit(limit).all()
    
    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get order by ID"""
        return self.db.query(Order).filter(Order.id == order_id).first()
    
    def get_by_status(self, status: OrderStatus) -> List[Order]:
        """Get orders by status"""
        return self.db.query(Order).filter(
            Order.status == status
        ).order_by(desc(Order.order_date), desc(Order.id)).all()
    
    def get_by_customer(self, customer_id: int) -> List[Order]:
        """Get orders placed by a customer"""
        return self.db.query(Order).filter(
            Order.customer_id == customer_id
        ).order_by(desc(Order.order_date), desc(Order.id)).all()
    
    def create(self, order_data: dict, items: List[dict]) -> Order:
        """
        Create new order together with its items
        
        Args:
            order_data: Dictionary with order fields
            items: Dictionaries with product_id, quantity and unit_price
        
        Returns:
            Created order
        
        Raises:
            ConstraintViolationError: If the order or any item is rejected;
                neither the order nor any item is stored in that case
        """
        order = Order(**order_data)
        order.items = [OrderItem(**item) for item in items]
        self.db.add(order)
        self._commit(order)
        return order
    
    def update_status(self, order_id: int, new_status: OrderStatus) -> Optional[Order]:
        """Update order status"""
        order = self.get_by_id(order_id)
        if not order:
            return None
        
        order.status = new_status
        self._commit(order)
        return order
    
    def delete(self, order_id: int) -> bool:
        """Delete order; its items go with it"""
        order = self.get_by_id(order_id)
        if not order:
            return False
        
        self.db.delete(order)
        self._commit()
        return True
    
    def count(self) -> int:
        """Get total count of orders"""
        return self.db.query(Order).count()
    
    # Order items
    
    def get_items(self, order_id: int) -> List[OrderItem]:
        """Get the items of an order"""
        return self.db.query(OrderItem).filter(
            OrderItem.order_id == order_id
        ).order_by(OrderItem.product_id).all()
    
    def get_item(self, order_id: int, product_id: int) -> Optional[OrderItem]:
        """Get one order line"""
        return self.db.get(OrderItem, (order_id, product_id))
    
    def add_item(self, order_id: int, item_data: dict) -> Optional[OrderItem]:
        """
        Add a line to an existing order
        
        Returns:
            Created item or None if the order does not exist
        
        Raises:
            UniquenessViolationError: If the order already has a line for the product
        """
        order = self.get_by_id(order_id)
        if not order:
            return None
        
        if self.get_item(order_id, item_data["product_id"]) is not None:
            raise UniquenessViolationError(
                f"Order {order_id} already has a line for product {item_data['product_id']}",
                constraint="order_items_pkey",
            )
        
        item = OrderItem(**item_data)
        order.items.append(item)
        self._commit(item)
        return item
    
    def update_item_quantity(self, order_id: int, product_id: int, quantity: int) -> Optional[OrderItem]:
        """Change the quantity of an order line"""
        item = self.get_item(order_id, product_id)
        if not item:
            return None
        
        item.quantity = quantity
        self._commit(item)
        return item
    
    def remove_item(self, order_id: int, product_id: int) -> bool:
        """Remove one line from an order"""
        item = self.get_item(order_id, product_id)
        if not item:
            return False
        
        order = item.order
        self.db.delete(item)
        self._commit()
        self.db.expire(order, ["items"])
        return True
    
    # Summary view
    
    def get_summary(self, order_id: int):
        """Get the summary view row of one order"""
        stmt = select(order_summaries).where(order_summaries.c.order_id == order_id)
        return self.db.execute(stmt).mappings().first()
    
    def get_summaries(self):
        """Get every summary view row"""
        stmt = select(order_summaries).order_by(order_summaries.c.order_id)
        return self.db.execute(stmt).mappings().all()
