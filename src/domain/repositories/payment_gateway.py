"""
Payment gateway interface

Handshake with the hosted card processor.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from ..value_objects.money import Money


class PaymentGateway(ABC):
    """Creates payment intents for the hosted card form"""

    @abstractmethod
    async def create_payment_intent(self, amount: Money, metadata: Dict[str, Any]) -> str:
        """Return the client secret the hosted payment form is opened with"""
