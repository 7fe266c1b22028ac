"""
Domain repository interfaces

Contains abstract repository interfaces that define contracts for data access.
These follow the Repository pattern and Dependency Inversion principle.
"""

from .client_state_repository import ClientStateRepository
from .game_result_repository import GameResultRepository
from .order_repository import OrderRepository
from .payment_gateway import PaymentGateway
from .product_repository import ProductRepository
from .wholesale_auth_gateway import WholesaleAuthGateway

__all__ = [
    'ClientStateRepository',
    'GameResultRepository',
    'OrderRepository',
    'PaymentGateway',
    'ProductRepository',
    'WholesaleAuthGateway',
]
