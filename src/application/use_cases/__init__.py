"""
Use Cases

Contains the business use cases of the application.
Each use case represents a single business operation.
"""

from .cart_management_use_case import CartManagementUseCase
from .checkout_use_case import CheckoutResponse, CheckoutState, CheckoutUseCase
from .product_catalog_use_case import ProductCatalogResponse, ProductCatalogUseCase, ProductInfo
from .rewards_use_case import RedemptionResponse, RewardResponse, RewardsUseCase, VipStatus
from .wholesale_access_use_case import WholesaleAccessResponse, WholesaleAccessUseCase

__all__ = [
    'CartManagementUseCase',
    'CheckoutResponse',
    'CheckoutState',
    'CheckoutUseCase',
    'ProductCatalogResponse',
    'ProductCatalogUseCase',
    'ProductInfo',
    'RedemptionResponse',
    'RewardResponse',
    'RewardsUseCase',
    'VipStatus',
    'WholesaleAccessResponse',
    'WholesaleAccessUseCase',
]
