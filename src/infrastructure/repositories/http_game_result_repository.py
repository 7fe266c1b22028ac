"""
HTTP Game Result Repository
"""

from typing import Any, Dict, Optional

from src.domain.repositories.game_result_repository import GameResultRepository
from src.infrastructure.http.api_client import StorefrontApiClient
from src.infrastructure.utilities.constants import ApiPaths

SERVICE_NAME = "games"


class HttpGameResultRepository(GameResultRepository):
    """Stores minigame results through POST games/result"""

    def __init__(self, api_client: StorefrontApiClient):
        self._api_client = api_client

    async def save_result(
        self, user_id: Optional[str], game_type: str, points_earned: int
    ) -> Dict[str, Any]:
        result = await self._api_client.post(
            ApiPaths.GAME_RESULT,
            SERVICE_NAME,
            {"userId": user_id, "gameType": game_type, "pointsEarned": points_earned},
        )
        return result or {}
