"""
Order DTOs

Data Transfer Objects for checkout and the order service payload.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from src.domain.entities.cart_entity import Cart
from src.domain.value_objects.money import Money
from src.domain.value_objects.payment_method import OrderStatus, PaymentMethod
from src.infrastructure.utilities.constants import ValidationRules
from src.infrastructure.utilities.exceptions import ValidationError
from src.infrastructure.utilities.i18n import tr


_FIELD_MESSAGE_KEYS = {
    "name": "NAME_REQUIRED",
    "email": "EMAIL_REQUIRED",
    "phone": "PHONE_REQUIRED",
    "address": "ADDRESS_REQUIRED",
    "city": "CITY_REQUIRED",
}


class ShippingInfo(BaseModel):
    """Delivery contact details collected at checkout"""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=ValidationRules.MIN_NAME_LENGTH)
    email: str
    phone: str = Field(min_length=ValidationRules.MIN_PHONE_LENGTH)
    address: str = Field(min_length=ValidationRules.MIN_ADDRESS_LENGTH)
    city: str = Field(min_length=ValidationRules.MIN_CITY_LENGTH)

    @field_validator("email")
    @classmethod
    def _email_shape(cls, value: str) -> str:
        if not re.match(ValidationRules.EMAIL_PATTERN, value):
            raise ValueError("invalid email address")
        return value

    @classmethod
    def parse(cls, data: Dict[str, Any], lang: Optional[str] = None) -> "ShippingInfo":
        """Validate the checkout form; the first bad field raises a localized ValidationError"""
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field_name = str(first["loc"][0]) if first["loc"] else ""
            key = _FIELD_MESSAGE_KEYS.get(field_name, "VALIDATION_ERROR")
            raise ValidationError(first["msg"], field=field_name, user_message=tr(key, lang)) from e


class OrderItemPayload(BaseModel):
    """One order line as sent to the order service"""

    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    name: str
    price: str
    quantity: int = Field(ge=1)


class OrderSubmission(BaseModel):
    """Order creation payload

    The server recomputes and validates everything in here; the client
    values are a request, not a source of truth.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId")
    items: List[OrderItemPayload]
    total: str
    payment_method: PaymentMethod = Field(alias="paymentMethod")
    status: OrderStatus
    points_earned: int = Field(alias="pointsEarned", ge=0)
    shipping_info: Optional[ShippingInfo] = Field(default=None, alias="shippingInfo")
    payment_intent_id: Optional[str] = Field(default=None, alias="paymentIntentId")

    @classmethod
    def from_cart(
        cls,
        cart: Cart,
        total: Money,
        payment_method: PaymentMethod,
        user_id: Optional[str] = None,
        shipping_info: Optional[ShippingInfo] = None,
        payment_intent_id: Optional[str] = None,
    ) -> "OrderSubmission":
        return cls(
            user_id=user_id,
            items=[
                OrderItemPayload(
                    product_id=line.product_id.value,
                    name=line.name,
                    price=line.unit_price.to_wire(),
                    quantity=line.quantity,
                )
                for line in cart
            ],
            total=total.to_wire(),
            payment_method=payment_method,
            status=payment_method.initial_order_status,
            points_earned=total.floor_units(),
            shipping_info=shipping_info,
            payment_intent_id=payment_intent_id,
        )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass
class OrderInfo:
    """Acknowledged order"""

    order_id: str
    total: float
    payment_method: PaymentMethod
    status: str
    points_earned: int
    created_at: Optional[datetime] = None

    @classmethod
    def from_api(
        cls,
        data: Dict[str, Any],
        fallback_points: int = 0,
        fallback_method: PaymentMethod = PaymentMethod.CASH_ON_DELIVERY,
        fallback_total: float = 0.0,
    ) -> "OrderInfo":
        """Build from the order service answer

        Only the id is required. The server's pointsEarned wins; the
        fallbacks fill in whatever the acknowledgement leaves out or sends
        in a shape this client does not know.
        """
        return cls(
            order_id=str(data["id"]),
            total=_parse_total(data.get("total"), fallback_total),
            payment_method=_parse_method(data.get("paymentMethod"), fallback_method),
            status=str(data.get("status") or OrderStatus.PENDING.value),
            points_earned=_parse_points(data.get("pointsEarned"), fallback_points),
            created_at=_parse_created_at(data.get("createdAt")),
        )


def _parse_total(value: Any, fallback: float) -> float:
    if value is None:
        return fallback
    try:
        return float(value)
    except (TypeError, ValueError):
        return fallback


def _parse_method(value: Any, fallback: PaymentMethod) -> PaymentMethod:
    if not value:
        return fallback
    try:
        return PaymentMethod.parse(value)
    except ValueError:
        return fallback


def _parse_points(value: Any, fallback: int) -> int:
    if value is None or isinstance(value, bool):
        return fallback
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return fallback


def _parse_created_at(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


@dataclass
class OrderHistoryResponse:
    """Orders placed by the signed-in user"""

    success: bool
    orders: List[OrderInfo] = field(default_factory=list)
    error_message: Optional[str] = None
