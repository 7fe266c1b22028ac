"""
Domain entities package

Contains the core business entities of the storefront: products, the cart,
the shopper session and its points ledger.
"""

from .cart_entity import Cart, CartLineItem, CartTotals, ShippingPolicy
from .points_ledger_entity import PointsLedger
from .product_entity import PRODUCT_CATEGORIES, Product
from .user_session_entity import ActivityCounters, UserSession

__all__ = [
    "ActivityCounters",
    "Cart",
    "CartLineItem",
    "CartTotals",
    "PRODUCT_CATEGORIES",
    "PointsLedger",
    "Product",
    "ShippingPolicy",
    "UserSession",
]
