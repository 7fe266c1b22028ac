"""
Cart Entity - line items and the pricing rules derived from them
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterator, List, Optional

from src.domain.value_objects.money import DEFAULT_CURRENCY, Money
from src.domain.value_objects.product_id import ProductId

from .product_entity import Product


@dataclass(frozen=True)
class ShippingPolicy:
    """Flat shipping fee waived from a subtotal threshold"""

    free_shipping_threshold: Money
    flat_fee: Money

    @classmethod
    def default(cls, currency: str = DEFAULT_CURRENCY) -> "ShippingPolicy":
        return cls(Money(Decimal("500"), currency), Money(Decimal("50"), currency))

    def shipping_for(self, subtotal: Money, has_items: bool) -> Money:
        """An empty cart ships nothing and is charged nothing"""
        if not has_items or subtotal >= self.free_shipping_threshold:
            return Money.zero(subtotal.currency)
        return self.flat_fee


@dataclass
class CartLineItem:
    """One product entry in the cart"""

    product_id: ProductId
    name: str
    unit_price: Money
    quantity: int = 1
    image_url: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError("Line item quantity must be a positive integer")

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.product_id.value,
            "name": self.name,
            "price": self.unit_price.to_wire(),
            "quantity": self.quantity,
            "imageUrl": self.image_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], currency: str = DEFAULT_CURRENCY) -> "CartLineItem":
        return cls(
            product_id=ProductId(data["id"]),
            name=data["name"],
            unit_price=Money.of(data["price"], currency),
            quantity=int(data["quantity"]),
            image_url=data.get("imageUrl"),
        )


@dataclass(frozen=True)
class CartTotals:
    """Derived cart amounts"""

    subtotal: Money
    shipping: Money
    total: Money
    item_count: int

    @property
    def has_free_shipping(self) -> bool:
        return self.shipping.is_zero()


class Cart:
    """
    Ordered collection of line items keyed by product id

    Insertion order is display order. Totals are always re-derived from
    the lines, nothing is cached.
    """

    def __init__(
        self,
        items: Optional[List[CartLineItem]] = None,
        shipping_policy: Optional[ShippingPolicy] = None,
        currency: str = DEFAULT_CURRENCY,
    ):
        self.currency = currency
        self.shipping_policy = shipping_policy or ShippingPolicy.default(currency)
        self._items: List[CartLineItem] = []
        for item in items or []:
            self._merge(item)

    @property
    def items(self) -> List[CartLineItem]:
        return list(self._items)

    def __iter__(self) -> Iterator[CartLineItem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def get_item(self, product_id: ProductId) -> Optional[CartLineItem]:
        for item in self._items:
            if item.product_id == product_id:
                return item
        return None

    def add_item(self, product: Product, tier_is_wholesale: bool) -> CartLineItem:
        """Add one unit of *product* at the price of the caller's tier"""
        existing = self.get_item(product.id)
        if existing:
            existing.quantity += 1
            return existing

        line = CartLineItem(
            product_id=product.id,
            name=product.name,
            unit_price=product.price_for_tier(tier_is_wholesale),
            quantity=1,
            image_url=product.image_url,
        )
        self._items.append(line)
        return line

    def remove_item(self, product_id: ProductId) -> bool:
        """Remove the line for *product_id*; returns False if it was absent"""
        before = len(self._items)
        self._items = [item for item in self._items if item.product_id != product_id]
        return len(self._items) != before

    def set_quantity(self, product_id: ProductId, quantity: int) -> Optional[CartLineItem]:
        """Replace the quantity of a line; zero or less removes it"""
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValueError("Line item quantity must be an integer")
        if quantity <= 0:
            self.remove_item(product_id)
            return None

        item = self.get_item(product_id)
        if item:
            item.quantity = quantity
        return item

    def clear(self):
        self._items = []

    def compute_totals(self) -> CartTotals:
        subtotal = Money.zero(self.currency)
        item_count = 0
        for item in self._items:
            subtotal = subtotal + item.line_total
            item_count += item.quantity

        shipping = self.shipping_policy.shipping_for(subtotal, has_items=bool(self._items))
        return CartTotals(
            subtotal=subtotal,
            shipping=shipping,
            total=subtotal + shipping,
            item_count=item_count,
        )

    def _merge(self, item: CartLineItem):
        existing = self.get_item(item.product_id)
        if existing:
            existing.quantity += item.quantity
        else:
            self._items.append(item)

    def to_list(self) -> list[dict[str, Any]]:
        return [item.to_dict() for item in self._items]

    @classmethod
    def from_list(
        cls,
        data: Optional[list[dict[str, Any]]],
        shipping_policy: Optional[ShippingPolicy] = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> "Cart":
        items = [CartLineItem.from_dict(entry, currency) for entry in data or []]
        return cls(items, shipping_policy=shipping_policy, currency=currency)
