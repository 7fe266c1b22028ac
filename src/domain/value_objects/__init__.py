"""
Domain value objects package

Contains immutable value objects that represent concepts in the business domain.
"""

from .money import Money
from .payment_method import OrderStatus, PaymentMethod
from .product_id import ProductId

__all__ = [
    "Money",
    "OrderStatus",
    "PaymentMethod",
    "ProductId",
]
