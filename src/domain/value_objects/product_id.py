"""Product ID value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductId:
    """Opaque product identifier issued by the catalog"""

    value: str

    def __post_init__(self):
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            object.__setattr__(self, "value", str(self.value))
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Product ID must be a non-empty string")

    def __str__(self) -> str:
        return self.value
