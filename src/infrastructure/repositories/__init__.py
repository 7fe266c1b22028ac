"""
Repository implementations

HTTP adapters for the storefront API services and the SQLAlchemy client
state store.
"""

from .http_game_result_repository import HttpGameResultRepository
from .http_order_repository import HttpOrderRepository
from .http_payment_gateway import HttpPaymentGateway
from .http_product_repository import HttpProductRepository
from .http_wholesale_auth_gateway import HttpWholesaleAuthGateway
from .sqlalchemy_client_state_repository import SQLAlchemyClientStateRepository

__all__ = [
    "HttpGameResultRepository",
    "HttpOrderRepository",
    "HttpPaymentGateway",
    "HttpProductRepository",
    "HttpWholesaleAuthGateway",
    "SQLAlchemyClientStateRepository",
]
