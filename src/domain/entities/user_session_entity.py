"""
User session entity - identity, pricing tier, points and activity of the shopper
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from .points_ledger_entity import PointsLedger


@dataclass
class ActivityCounters:
    """Lifetime counts the achievements are measured against"""

    visits: int = 0
    purchases: int = 0
    games_played: int = 0
    shares: int = 0

    def __post_init__(self):
        for name in ("visits", "purchases", "games_played", "shares"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"Activity counter {name} must be a non-negative integer")

    def to_dict(self) -> dict[str, int]:
        return {
            "visits": self.visits,
            "purchases": self.purchases,
            "gamesPlayed": self.games_played,
            "shareCount": self.shares,
        }

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "ActivityCounters":
        data = data or {}
        return cls(
            visits=data.get("visits", 0),
            purchases=data.get("purchases", 0),
            games_played=data.get("gamesPlayed", 0),
            shares=data.get("shareCount", 0),
        )


@dataclass
class UserSession:
    """Shopper state that survives page reloads"""

    user: Optional[dict[str, Any]] = None
    is_wholesale_tier: bool = False
    points: PointsLedger = field(default_factory=PointsLedger)
    last_visit_date: Optional[date] = None
    activity: ActivityCounters = field(default_factory=ActivityCounters)

    @property
    def user_id(self) -> Optional[str]:
        if not self.user:
            return None
        user_id = self.user.get("id")
        return str(user_id) if user_id is not None else None

    @property
    def is_signed_in(self) -> bool:
        return self.user_id is not None

    def enter_wholesale_tier(self, user: dict[str, Any]):
        self.user = user
        self.is_wholesale_tier = True

    def leave_wholesale_tier(self):
        self.is_wholesale_tier = False

    def has_visited_on(self, day: date) -> bool:
        return self.last_visit_date == day

    def record_visit(self, day: date):
        self.last_visit_date = day
        self.activity.visits += 1

    def record_purchase(self):
        self.activity.purchases += 1

    def record_game(self):
        self.activity.games_played += 1

    def record_share(self):
        self.activity.shares += 1
