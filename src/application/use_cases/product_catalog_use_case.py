"""
Product catalog use case

Handles product browsing, search, and information retrieval.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from src.domain.entities.product_entity import PRODUCT_CATEGORIES, Product
from src.domain.repositories.product_repository import ProductRepository
from src.domain.value_objects.product_id import ProductId
from src.infrastructure.utilities.exceptions import (
    ExternalServiceError,
    ProductNotFoundError,
    ValidationError,
    validate_and_raise,
)
from src.infrastructure.utilities.i18n import tr


@dataclass
class ProductInfo:
    """Product information response"""

    id: str
    name: str
    category: str
    price: float
    retail_price: float
    wholesale_price: float
    description: str = ""
    image_url: Optional[str] = None
    specs: dict[str, Any] = field(default_factory=dict)


@dataclass
class ProductCatalogResponse:
    """Response for product catalog operations"""

    success: bool
    products: list[ProductInfo] | None = None
    product: ProductInfo | None = None
    product_entity: Product | None = None
    error_message: str | None = None


class ProductCatalogUseCase:
    """
    Use case for product catalog operations

    Handles:
    1. Product listing, optionally by category and search term
    2. Product details retrieval
    Prices are shown for the shopper's current tier.
    """

    def __init__(self, product_repository: ProductRepository, language: Optional[str] = None):
        self._product_repository = product_repository
        self._language = language
        self._logger = logging.getLogger(self.__class__.__name__)

    async def get_products(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        is_wholesale: bool = False,
    ) -> ProductCatalogResponse:
        """List active products"""
        try:
            validate_and_raise(
                category is None or category in PRODUCT_CATEGORIES,
                ValidationError,
                f"Unknown category: {category}",
                field="category",
                user_message=tr("INVALID_CATEGORY", self._language, category=category),
            )
        except ValidationError as e:
            self._logger.warning("⚠️ UNKNOWN CATEGORY requested: %s", category)
            return ProductCatalogResponse(success=False, error_message=e.user_message)

        search = search.strip() if search else None
        try:
            products = await self._product_repository.find_products(category=category, search=search)
        except ExternalServiceError as e:
            self._logger.error("💥 CATALOG UNAVAILABLE (category=%s, search=%s): %s", category, search, e)
            return ProductCatalogResponse(
                success=False, error_message=tr("CATALOG_UNAVAILABLE", self._language)
            )

        product_infos = [self._map_to_product_info(p, is_wholesale) for p in products if p.is_active]
        self._logger.info("📋 CATALOG: %d products (category=%s, search=%s)", len(product_infos), category, search)
        return ProductCatalogResponse(success=True, products=product_infos)

    async def get_product(self, product_id: str, is_wholesale: bool = False) -> ProductCatalogResponse:
        """Get a single active product"""
        try:
            product = await self._find_active_product(product_id)
        except ProductNotFoundError as e:
            self._logger.info("🔍 PRODUCT NOT FOUND: %s", e.product_id)
            return ProductCatalogResponse(success=False, error_message=e.user_message)
        except ExternalServiceError as e:
            self._logger.error("💥 CATALOG UNAVAILABLE for product %s: %s", product_id, e)
            return ProductCatalogResponse(
                success=False, error_message=tr("CATALOG_UNAVAILABLE", self._language)
            )

        return ProductCatalogResponse(
            success=True,
            product=self._map_to_product_info(product, is_wholesale),
            product_entity=product,
        )

    async def _find_active_product(self, product_id: str) -> Product:
        try:
            product = await self._product_repository.find_by_id(ProductId(product_id))
        except ValueError as e:
            raise ProductNotFoundError(str(product_id), self._language) from e

        if product is None or not product.is_active:
            raise ProductNotFoundError(str(product_id), self._language)
        return product

    def _map_to_product_info(self, product: Product, is_wholesale: bool) -> ProductInfo:
        """Map domain product to response DTO"""
        return ProductInfo(
            id=product.id.value,
            name=product.name,
            category=product.category,
            price=product.price_for_tier(is_wholesale).to_float(),
            retail_price=product.retail_price.to_float(),
            wholesale_price=product.wholesale_price.to_float(),
            description=product.description or "",
            image_url=product.image_url,
            specs=product.specs,
        )
