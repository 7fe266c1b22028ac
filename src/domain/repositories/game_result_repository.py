"""
Game result repository interface
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class GameResultRepository(ABC):
    """Records minigame rewards on the server"""

    @abstractmethod
    async def save_result(
        self, user_id: Optional[str], game_type: str, points_earned: int
    ) -> Dict[str, Any]:
        """Store a game result; returns the stored record"""
