"""
Cart DTOs

Data Transfer Objects handed from the cart engine to the checkout UI.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from src.domain.entities.cart_entity import Cart, CartLineItem


@dataclass
class CartItemInfo:
    """Cart item information"""

    product_id: str
    product_name: str
    quantity: int
    unit_price: float
    total_price: float
    image_url: Optional[str] = None

    @classmethod
    def from_line(cls, line: CartLineItem) -> "CartItemInfo":
        return cls(
            product_id=line.product_id.value,
            product_name=line.name,
            quantity=line.quantity,
            unit_price=line.unit_price.to_float(),
            total_price=line.line_total.to_float(),
            image_url=line.image_url,
        )


@dataclass
class CartSummary:
    """Cart contents and totals"""

    items: List[CartItemInfo] = field(default_factory=list)
    subtotal: float = 0.0
    shipping: float = 0.0
    total: float = 0.0
    item_count: int = 0
    free_shipping: bool = False

    @classmethod
    def from_cart(cls, cart: Cart) -> "CartSummary":
        totals = cart.compute_totals()
        return cls(
            items=[CartItemInfo.from_line(line) for line in cart],
            subtotal=totals.subtotal.to_float(),
            shipping=totals.shipping.to_float(),
            total=totals.total.to_float(),
            item_count=totals.item_count,
            free_shipping=not cart.is_empty() and totals.has_free_shipping,
        )


@dataclass
class CartOperationResponse:
    """Response for cart operations"""

    success: bool
    cart_summary: Optional[CartSummary] = None
    points_awarded: int = 0
    error_message: Optional[str] = None
