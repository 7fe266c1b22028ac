"""
HTTP Product Repository

Catalog access over the storefront API.
"""

import logging
from typing import List, Optional

from src.domain.entities.product_entity import Product
from src.domain.repositories.product_repository import ProductRepository
from src.domain.value_objects.money import DEFAULT_CURRENCY
from src.domain.value_objects.product_id import ProductId
from src.infrastructure.http.api_client import StorefrontApiClient
from src.infrastructure.utilities.constants import ApiPaths
from src.infrastructure.utilities.exceptions import ApiResponseError

SERVICE_NAME = "catalog"


class HttpProductRepository(ProductRepository):
    """Product catalog backed by GET products"""

    def __init__(self, api_client: StorefrontApiClient, currency: str = DEFAULT_CURRENCY):
        self._api_client = api_client
        self._currency = currency
        self._logger = logging.getLogger(self.__class__.__name__)

    async def find_products(
        self, category: Optional[str] = None, search: Optional[str] = None
    ) -> List[Product]:
        data = await self._api_client.get(
            ApiPaths.PRODUCTS, SERVICE_NAME, params={"category": category, "search": search}
        )
        products = []
        for item in data or []:
            try:
                products.append(Product.from_api(item, self._currency))
            except (KeyError, TypeError, ValueError) as e:
                # One malformed entry must not hide the rest of the catalog
                self._logger.warning("⚠️ SKIPPING MALFORMED PRODUCT %r: %s", item.get("id") if isinstance(item, dict) else item, e)
        return products

    async def find_by_id(self, product_id: ProductId) -> Optional[Product]:
        try:
            data = await self._api_client.get(
                ApiPaths.PRODUCT.format(product_id=product_id.value), SERVICE_NAME
            )
        except ApiResponseError as e:
            if e.status_code == 404:
                return None
            raise
        return Product.from_api(data, self._currency) if data else None
