"""
HTTP Order Repository

Order creation and history over the storefront API.
"""

from typing import Any, Dict, List

from src.domain.repositories.order_repository import OrderRepository
from src.infrastructure.http.api_client import StorefrontApiClient
from src.infrastructure.utilities.constants import ApiPaths
from src.infrastructure.utilities.exceptions import OrderSubmissionError

SERVICE_NAME = "orders"


class HttpOrderRepository(OrderRepository):
    """Order service backed by POST orders / GET orders/user/{id}"""

    def __init__(self, api_client: StorefrontApiClient):
        self._api_client = api_client

    async def create_order(self, order_data: Dict[str, Any]) -> Dict[str, Any]:
        acknowledged = await self._api_client.post(ApiPaths.ORDERS, SERVICE_NAME, order_data)
        if not isinstance(acknowledged, dict) or acknowledged.get("id") is None:
            raise OrderSubmissionError("order service did not return an order id")
        return acknowledged

    async def get_orders_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        orders = await self._api_client.get(ApiPaths.USER_ORDERS.format(user_id=user_id), SERVICE_NAME)
        return list(orders or [])
