"""
Product repository interface

Defines the contract for read-only catalog access.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.product_entity import Product
from ..value_objects.product_id import ProductId


class ProductRepository(ABC):
    """Repository interface for the product catalog"""

    @abstractmethod
    async def find_products(
        self, category: Optional[str] = None, search: Optional[str] = None
    ) -> List[Product]:
        """List products, optionally filtered by category and/or search term"""

    @abstractmethod
    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        """Get a single product, None when the catalog does not know it"""
