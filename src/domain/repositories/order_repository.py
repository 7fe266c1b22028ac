"""
Order repository interface

Defines the contract for the remote order service.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class OrderRepository(ABC):
    """Repository interface for order operations"""

    @abstractmethod
    async def create_order(self, order_data: Dict[str, Any]) -> Dict[str, Any]:
        """Submit an order; returns the acknowledged order ({id, pointsEarned, status})"""

    @abstractmethod
    async def get_orders_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """Get the orders placed by a user"""
