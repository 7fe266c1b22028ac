"""
Rewards use case

Daily visit bonus, minigames, VIP levels and point redemption.
Minigame points are credited only once the game-results service has
stored the result.
"""

import logging
import random
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from src.application.storefront_store import StorefrontStore
from src.domain.repositories.game_result_repository import GameResultRepository
from src.domain.value_objects.money import Money
from src.infrastructure.utilities.constants import Achievements, RewardSettings, VipLevels
from src.infrastructure.utilities.exceptions import ClientStateError, ExternalServiceError
from src.infrastructure.utilities.i18n import tr

BASIC_LEVEL = "BÁSICO"
SOCIAL_SHARE = "social_share"


@dataclass
class VipStatus:
    """VIP level reached with the current balance"""

    level: str
    discount_percent: int
    points: int
    next_level: Optional[str] = None
    points_to_next_level: int = 0


@dataclass
class Achievement:
    """Medal or trophy with the shopper's progress towards it"""

    id: str
    name: str
    kind: str
    progress: int
    total: int
    earned: bool
    rarity: str
    points: int = 0


@dataclass
class RewardResponse:
    """Response for reward operations"""

    success: bool
    points_awarded: int = 0
    balance: int = 0
    message: Optional[str] = None
    error_message: Optional[str] = None


@dataclass
class RedemptionResponse:
    """Points turned into a checkout discount"""

    success: bool
    points_redeemed: int = 0
    discount: Optional[Money] = None
    balance: int = 0
    error_message: Optional[str] = None


class RewardsUseCase:
    """
    Use case for the loyalty program

    Handles:
    1. Daily visit points (once per calendar day)
    2. Trivia, puzzle, roulette and social share rewards
    3. VIP level lookup and achievements
    4. Redeeming points as a discount
    """

    def __init__(
        self,
        store: StorefrontStore,
        game_result_repository: GameResultRepository,
        points_per_visit: int = 10,
        point_value: Decimal = Decimal("0.01"),
        rng: Optional[random.Random] = None,
        language: Optional[str] = None,
    ):
        self._store = store
        self._game_result_repository = game_result_repository
        self._points_per_visit = points_per_visit
        self._point_value = Decimal(point_value)
        self._rng = rng or random.Random()
        self._language = language
        self._logger = logging.getLogger(self.__class__.__name__)

    def record_daily_visit(self, today: Optional[date] = None) -> RewardResponse:
        """Award the visit bonus the first time the shopper shows up on a given day"""
        today = today or date.today()
        session = self._store.session

        if session.has_visited_on(today):
            return RewardResponse(
                success=True,
                balance=self._store.points.balance,
                message=tr("ALREADY_VISITED_TODAY", self._language),
            )

        session.record_visit(today)
        self._store.points.credit(self._points_per_visit)
        self._logger.info("👋 DAILY VISIT %s: +%d points", today, self._points_per_visit)
        self._persist()
        return RewardResponse(
            success=True,
            points_awarded=self._points_per_visit,
            balance=self._store.points.balance,
            message=tr("DAILY_VISIT", self._language, points=self._points_per_visit),
        )

    async def play_trivia(self, correct: bool) -> RewardResponse:
        if not correct:
            self._record_lost_game()
            return RewardResponse(
                success=False,
                balance=self._store.points.balance,
                error_message=tr("GAME_WRONG_ANSWER", self._language),
            )
        return await self._award_game("trivia", RewardSettings.TRIVIA_POINTS)

    async def solve_puzzle(self, answer) -> RewardResponse:
        try:
            is_correct = int(str(answer).strip()) == RewardSettings.PUZZLE_ANSWER
        except ValueError:
            is_correct = False

        if not is_correct:
            self._record_lost_game()
            return RewardResponse(
                success=False,
                balance=self._store.points.balance,
                error_message=tr("PUZZLE_WRONG_ANSWER", self._language, answer=RewardSettings.PUZZLE_ANSWER),
            )
        return await self._award_game("puzzle", RewardSettings.PUZZLE_POINTS)

    async def spin_roulette(self) -> RewardResponse:
        prize = self._rng.choice(RewardSettings.ROULETTE_PRIZES)
        self._logger.info("🎰 ROULETTE landed on %d", prize)
        return await self._award_game("roulette", prize)

    async def share_on_social(self) -> RewardResponse:
        return await self._award_game(SOCIAL_SHARE, RewardSettings.SOCIAL_SHARE_POINTS)

    def vip_status(self) -> VipStatus:
        """Highest level whose threshold the balance reaches"""
        balance = self._store.points.balance
        next_level = None
        for name, threshold, discount_percent in VipLevels.LEVELS:
            if balance >= threshold:
                return VipStatus(
                    level=name,
                    discount_percent=discount_percent,
                    points=balance,
                    next_level=next_level[0] if next_level else None,
                    points_to_next_level=next_level[1] - balance if next_level else 0,
                )
            next_level = (name, threshold)

        return VipStatus(
            level=BASIC_LEVEL,
            discount_percent=0,
            points=balance,
            next_level=next_level[0] if next_level else None,
            points_to_next_level=next_level[1] - balance if next_level else 0,
        )

    def achievements(self) -> list[Achievement]:
        """Medals for the activity counters, then trophies for the points balance

        The listed points are what each medal is worth on the program page;
        reaching a medal does not credit them.
        """
        activity = self._store.session.activity
        balance = self._store.points.balance
        medals = [
            Achievement(
                id=medal_id,
                name=name,
                kind="medal",
                progress=min(getattr(activity, counter), target),
                total=target,
                earned=getattr(activity, counter) >= target,
                rarity=rarity,
                points=points,
            )
            for medal_id, name, counter, target, rarity, points in Achievements.MEDALS
        ]
        trophies = [
            Achievement(
                id=trophy_id,
                name=name,
                kind="trophy",
                progress=min(balance, target),
                total=target,
                earned=balance >= target,
                rarity=tier,
            )
            for trophy_id, name, target, tier in Achievements.TROPHIES
        ]
        return medals + trophies

    def available_discount(self) -> Money:
        """Money value of the whole balance"""
        return Money.of(self._point_value * self._store.points.balance, self._store.currency)

    def redeem_points(self, points: int) -> RedemptionResponse:
        """Spend up to *points*; the discount is the value of what was actually spent"""
        if not isinstance(points, int) or points <= 0:
            return RedemptionResponse(
                success=False,
                balance=self._store.points.balance,
                error_message=tr("REDEEM_INVALID", self._language),
            )

        spent = self._store.points.debit(points)
        discount = Money.of(self._point_value * spent, self._store.currency)
        self._logger.info("🎁 REDEEMED %d points (requested %d) for %s", spent, points, discount)
        self._persist()
        return RedemptionResponse(
            success=True,
            points_redeemed=spent,
            discount=discount,
            balance=self._store.points.balance,
        )

    async def _award_game(self, game_type: str, points: int) -> RewardResponse:
        user_id = self._store.session.user_id
        try:
            result = await self._game_result_repository.save_result(user_id, game_type, points)
        except ExternalServiceError as e:
            self._logger.error("💥 GAME RESULT NOT SAVED (%s, %d points): %s", game_type, points, e)
            return RewardResponse(
                success=False,
                balance=self._store.points.balance,
                error_message=tr("GAME_RESULT_FAILED", self._language),
            )

        result_id = (result or {}).get("id")
        reference = f"game:{result_id}" if result_id is not None else None
        if not self._store.points.credit(points, reference=reference):
            self._logger.warning("⚠️ GAME RESULT %s ALREADY CREDITED", result_id)
            return RewardResponse(success=True, balance=self._store.points.balance)

        if game_type == SOCIAL_SHARE:
            self._store.session.record_share()
        else:
            self._store.session.record_game()
        self._logger.info("🎮 GAME %s WON: +%d points", game_type.upper(), points)
        self._persist()
        return RewardResponse(
            success=True,
            points_awarded=points,
            balance=self._store.points.balance,
            message=tr("GAME_WON", self._language, points=points),
        )

    def _record_lost_game(self):
        self._store.session.record_game()
        self._persist()

    def _persist(self):
        try:
            self._store.persist()
        except ClientStateError as e:
            self._logger.error("💥 CLIENT STATE NOT SAVED: %s", e, exc_info=True)
