"""
Product Repository - Data Access Layer
"""
from typing import List, Optional

from order_store.models.product import Product
from order_store.repositories.base import BaseRepository


class ProductRepository(BaseRepository):
    """Repository for Product CRUD operations"""
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Product]:
        """Get all products with pagination"""
        return self.db.query(Product).order_by(Product.id).offset(skip).limit(limit).all()
    
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID"""
        return self.db.query(Product).filter(Product.id == product_id).first()
    
    def get_by_category(self, category: str) -> List[Product]:
        """Get products by category"""
        return self.db.query(Product).filter(Product.category == category).order_by(Product.id).all()
    
    def create(self, product_data: dict) -> Product:
        """Create new product"""
        product = Product(**product_data)
        self.db.add(product)
        self._commit(product)
        return product
    
    def update(self, product_id: int, update_data: dict) -> Optional[Product]:
        """Update existing product; order items keep the price they were sold at"""
        product = self.get_by_id(product_id)
        if not product:
            return None
        
        for field, value in update_data.items():
            setattr(product, field, value)
        
        self._commit(product)
        return product
    
    def delete(self, product_id: int) -> bool:
        """
        Delete product
        
        Raises:
            ReferentialIntegrityError: If an order item still references the product
        """
        product = self.get_by_id(product_id)
        if not product:
            return False
        
        self.db.delete(product)
        self._commit()
        return True
    
    def count(self) -> int:
        """Get total count of products"""
        return self.db.query(Product).count()
