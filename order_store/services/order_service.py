"""
Order Service - Business Logic Layer
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from order_store.exceptions import (
    DomainCheckError,
    InvalidStatusTransitionError,
    ReferentialIntegrityError,
)
from order_store.models.order import OrderStatus
from order_store.repositories.order_repository import OrderRepository
from order_store.repositories.product_repository import ProductRepository
from order_store.schemas.order import (
    OrderCreate,
    OrderItemCreate,
    OrderItemQuantityUpdate,
    OrderItemResponse,
    OrderResponse,
    OrderListResponse,
    OrderSummaryResponse,
)

logger = logging.getLogger(__name__)


class OrderService:
    """Service layer for order business logic"""
    
    def __init__(self, db: Session):
        self.repository = OrderRepository(db)
        self.product_repository = ProductRepository(db)
    
    def list_orders(self, skip: int = 0, limit: int = 100) -> OrderListResponse:
        """Get all orders with pagination"""
        orders = self.repository.get_all(skip=skip, limit=limit)
        total = self.repository.count()
        
        return OrderListResponse(
            orders=[OrderResponse.model_validate(o) for o in orders],
            total=total
        )
    
    def get_order(self, order_id: int) -> Optional[OrderResponse]:
        """Get order by ID"""
        order = self.repository.get_by_id(order_id)
        if not order:
            return None
        return OrderResponse.model_validate(order)
    
    def get_orders_by_customer(self, customer_id: int) -> List[OrderResponse]:
        """Get orders placed by a customer"""
        orders = self.repository.get_by_customer(customer_id)
        return [OrderResponse.model_validate(o) for o in orders]
    
    def get_orders_by_status(self, status: OrderStatus) -> List[OrderResponse]:
        """Get orders in a given status"""
        orders = self.repository.get_by_status(status)
        return [OrderResponse.model_validate(o) for o in orders]
    
    def create_order(self, order_data: OrderCreate) -> OrderResponse:
        """
        Create new order with its items
        
        Steps:
        1. Resolve the unit price of every item (the product's current price
           unless the caller fixed one)
        2. Save the order and all items in one commit
        
        Args:
            order_data: Order creation data
        
        Returns:
            Created order
        
        Raises:
            ReferentialIntegrityError: If the customer or a product does not exist
            DomainCheckError: If an item breaks a column check
        """
        items = [self._price_item(item) for item in order_data.items]
        order = self.repository.create(
            order_data.model_dump(exclude={"items"}),
            items,
        )
        logger.info(
            "Order created | order_id=%s customer_id=%s items=%s",
            order.id, order.customer_id, len(items)
        )
        return OrderResponse.model_validate(order)
    
    def update_order_status(self, order_id: int, new_status: OrderStatus) -> Optional[OrderResponse]:
        """
        Move an order along its lifecycle
        
        Args:
            order_id: Order ID
            new_status: Requested status
        
        Returns:
            Updated order or None if not found
        
        Raises:
            DomainCheckError: If the requested status is not an order status
            InvalidStatusTransitionError: If the lifecycle does not allow the change
        """
        order = self.repository.get_by_id(order_id)
        if not order:
            return None
        
        try:
            new_status = OrderStatus(new_status)
        except ValueError as e:
            raise DomainCheckError(str(e), constraint="order_status") from e
        
        current = OrderStatus(order.status)
        if not current.can_transition_to(new_status):
            raise InvalidStatusTransitionError(order_id, current, new_status)
        if current == new_status:
            return OrderResponse.model_validate(order)
        
        order = self.repository.update_status(order_id, new_status)
        logger.info(
            "Order status changed | order_id=%s %s -> %s",
            order_id, current.value, new_status.value
        )
        return OrderResponse.model_validate(order)
    
    def delete_order(self, order_id: int) -> bool:
        """Delete order and, through the cascade, its items"""
        deleted = self.repository.delete(order_id)
        if deleted:
            logger.info("Order deleted | order_id=%s", order_id)
        return deleted
    
    # Order items
    
    def get_items(self, order_id: int) -> List[OrderItemResponse]:
        """Get the items of an order"""
        return [OrderItemResponse.model_validate(i) for i in self.repository.get_items(order_id)]
    
    def add_item(self, order_id: int, item_data: OrderItemCreate) -> Optional[OrderItemResponse]:
        """
        Add a line to an existing order
        
        Returns:
            Created item or None if the order does not exist
        
        Raises:
            UniquenessViolationError: If the order already has a line for the product
            ReferentialIntegrityError: If the product does not exist
        """
        if not self.repository.get_by_id(order_id):
            return None
        
        item = self.repository.add_item(order_id, self._price_item(item_data))
        if not item:
            return None
        logger.info("Order item added | order_id=%s product_id=%s", order_id, item.product_id)
        return OrderItemResponse.model_validate(item)
    
    def update_item_quantity(
        self,
        order_id: int,
        product_id: int,
        quantity_data: OrderItemQuantityUpdate
    ) -> Optional[OrderItemResponse]:
        """
        Change the quantity of an order line
        
        Returns:
            Updated item or None if the order has no line for the product
        """
        item = self.repository.update_item_quantity(order_id, product_id, quantity_data.quantity)
        if not item:
            return None
        return OrderItemResponse.model_validate(item)
    
    def remove_item(self, order_id: int, product_id: int) -> bool:
        """Remove one line from an order"""
        return self.repository.remove_item(order_id, product_id)
    
    # Summary view
    
    def get_order_summary(self, order_id: int) -> Optional[OrderSummaryResponse]:
        """Get id, date, status and total of one order"""
        row = self.repository.get_summary(order_id)
        if not row:
            return None
        return OrderSummaryResponse.model_validate(dict(row))
    
    def list_order_summaries(self) -> List[OrderSummaryResponse]:
        """Get id, date, status and total of every order with items"""
        return [OrderSummaryResponse.model_validate(dict(row)) for row in self.repository.get_summaries()]
    
    def _price_item(self, item: OrderItemCreate) -> dict:
        """Capture the unit price the item is sold at"""
        item_data = item.model_dump()
        if item_data["unit_price"] is None:
            product = self.product_repository.get_by_id(item.product_id)
            if not product:
                raise ReferentialIntegrityError(
                    f"Product {item.product_id} not found",
                    constraint="fk_order_items_product",
                )
            item_data["unit_price"] = product.price
        return item_data
