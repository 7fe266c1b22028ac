"""
Payment method value object

Closed set of checkout payment methods and the order status each one starts in.
"""

from enum import Enum


class OrderStatus(str, Enum):
    """Initial status of a submitted order"""

    PENDING = "pending"
    COMPLETED = "completed"


class PaymentMethod(str, Enum):
    """Payment methods offered at checkout"""

    CARD = "card"
    PEER_TRANSFER = "peer_transfer"
    HOSTED_WALLET = "hosted_wallet"
    CASH_ON_DELIVERY = "cash_on_delivery"

    @classmethod
    def parse(cls, value: "str | PaymentMethod") -> "PaymentMethod":
        """Parse a wire/UI tag, rejecting anything outside the closed set"""
        if isinstance(value, PaymentMethod):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown payment method: {value!r}") from exc

    @property
    def uses_hosted_payment(self) -> bool:
        """Card payments are collected by the hosted processor page"""
        match self:
            case PaymentMethod.CARD:
                return True
            case PaymentMethod.PEER_TRANSFER | PaymentMethod.HOSTED_WALLET | PaymentMethod.CASH_ON_DELIVERY:
                return False

    @property
    def initial_order_status(self) -> OrderStatus:
        match self:
            case PaymentMethod.CARD:
                return OrderStatus.PENDING
            case PaymentMethod.PEER_TRANSFER | PaymentMethod.HOSTED_WALLET | PaymentMethod.CASH_ON_DELIVERY:
                return OrderStatus.COMPLETED

    @property
    def label_key(self) -> str:
        """i18n key of the display name"""
        return f"PAYMENT_METHOD_{self.name}"
