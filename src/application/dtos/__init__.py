"""
Data Transfer Objects passed between the use cases and their callers
"""

from .cart_dtos import CartItemInfo, CartOperationResponse, CartSummary
from .order_dtos import (
    OrderHistoryResponse,
    OrderInfo,
    OrderItemPayload,
    OrderSubmission,
    ShippingInfo,
)

__all__ = [
    'CartItemInfo',
    'CartOperationResponse',
    'CartSummary',
    'OrderHistoryResponse',
    'OrderInfo',
    'OrderItemPayload',
    'OrderSubmission',
    'ShippingInfo',
]
