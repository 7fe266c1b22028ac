"""
HTTP Payment Gateway

Payment-intent handshake with the hosted card processor.
"""

from typing import Any, Dict

from src.domain.repositories.payment_gateway import PaymentGateway
from src.domain.value_objects.money import Money
from src.infrastructure.http.api_client import StorefrontApiClient
from src.infrastructure.utilities.constants import ApiPaths
from src.infrastructure.utilities.exceptions import ApiResponseError

SERVICE_NAME = "payments"


class HttpPaymentGateway(PaymentGateway):
    """Creates payment intents through POST payment-intents"""

    def __init__(self, api_client: StorefrontApiClient):
        self._api_client = api_client

    async def create_payment_intent(self, amount: Money, metadata: Dict[str, Any]) -> str:
        data = await self._api_client.post(
            ApiPaths.PAYMENT_INTENTS,
            SERVICE_NAME,
            {"amount": amount.to_wire(), "currency": amount.currency.lower(), "metadata": metadata},
        )
        client_secret = (data or {}).get("clientSecret")
        if not client_secret:
            raise ApiResponseError(SERVICE_NAME, 502, "missing client secret")
        return client_secret
