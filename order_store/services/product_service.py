"""
Product Service - Business Logic Layer
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from order_store.repositories.product_repository import ProductRepository
from order_store.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse,
)

logger = logging.getLogger(__name__)


class ProductService:
    """Service layer for product business logic"""
    
    def __init__(self, db: Session):
        self.repository = ProductRepository(db)
    
    def list_products(self, skip: int = 0, limit: int = 100) -> ProductListResponse:
        """Get all products with pagination"""
        products = self.repository.get_all(skip=skip, limit=limit)
        total = self.repository.count()
        
        return ProductListResponse(
            products=[ProductResponse.model_validate(p) for p in products],
            total=total
        )
    
    def get_product(self, product_id: int) -> Optional[ProductResponse]:
        """Get product by ID"""
        product = self.repository.get_by_id(product_id)
        if not product:
            return None
        return ProductResponse.model_validate(product)
    
    def get_products_by_category(self, category: str) -> List[ProductResponse]:
        """Get products in a category"""
        products = self.repository.get_by_category(category)
        return [ProductResponse.model_validate(p) for p in products]
    
    def create_product(self, product_data: ProductCreate) -> ProductResponse:
        """Create new product"""
        product = self.repository.create(product_data.model_dump())
        logger.info("Product created | product_id=%s category=%s", product.id, product.category)
        return ProductResponse.model_validate(product)
    
    def update_product(self, product_id: int, product_data: ProductUpdate) -> Optional[ProductResponse]:
        """Update existing product"""
        product = self.repository.update(product_id, product_data.model_dump(exclude_unset=True))
        if not product:
            return None
        logger.info("Product updated | product_id=%s", product_id)
        return ProductResponse.model_validate(product)
    
    def delete_product(self, product_id: int) -> bool:
        """
        Delete product
        
        Raises:
            ReferentialIntegrityError: If an order item still references the product
        """
        deleted = self.repository.delete(product_id)
        if deleted:
            logger.info("Product deleted | product_id=%s", product_id)
        return deleted
