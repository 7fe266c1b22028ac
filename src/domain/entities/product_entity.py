# pylint: disable=too-many-instance-attributes
"""
Product Entity - catalog entry with retail and wholesale pricing
"""

from dataclasses import dataclass, field
from typing import Any

from src.domain.value_objects.money import Money
from src.domain.value_objects.product_id import ProductId

PRODUCT_CATEGORIES = ("cars", "motorcycles", "electronics")


@dataclass
class Product:
    """Product domain entity"""

    id: ProductId
    name: str
    category: str
    retail_price: Money
    wholesale_price: Money
    description: str | None = None
    image_url: str | None = None
    specs: dict[str, Any] = field(default_factory=dict)
    is_active: bool = True

    def __post_init__(self):
        """Validate the product after initialization"""
        if not self.name or not self.name.strip():
            raise ValueError("Product name cannot be empty")

        if self.category not in PRODUCT_CATEGORIES:
            raise ValueError(f"Unknown product category: {self.category}")

    def price_for_tier(self, is_wholesale: bool) -> Money:
        """Unit price for a retail or wholesale buyer"""
        return self.wholesale_price if is_wholesale else self.retail_price

    @classmethod
    def from_api(cls, data: dict[str, Any], currency: str = "USD") -> "Product":
        """Build a product from the catalog service payload"""
        return cls(
            id=ProductId(data["id"]),
            name=data["name"],
            category=data["category"],
            retail_price=Money.of(data["retailPrice"], currency),
            wholesale_price=Money.of(data["wholesalePrice"], currency),
            description=data.get("description"),
            image_url=data.get("imageUrl"),
            specs=data.get("specs") or {},
            is_active=data.get("isActive", True),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary representation"""
        return {
            "id": self.id.value,
            "name": self.name,
            "category": self.category,
            "retail_price": self.retail_price.to_wire(),
            "wholesale_price": self.wholesale_price.to_wire(),
            "description": self.description,
            "image_url": self.image_url,
            "specs": self.specs,
            "is_active": self.is_active,
        }
