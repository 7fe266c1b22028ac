"""
Points ledger - loyalty balance with floor-at-zero spending

Credits may carry a reference (an order id, a game result id); a reference
is only ever credited once, so retried acknowledgements do not double-credit.
Only the most recent references are remembered.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

MAX_CREDITED_REFERENCES = 200


@dataclass
class PointsLedger:
    """Non-negative points balance"""

    balance: int = 0
    credited_references: list[str] = field(default_factory=list)

    def __post_init__(self):
        if not isinstance(self.balance, int) or self.balance < 0:
            raise ValueError("Points balance must be a non-negative integer")
        references = list(dict.fromkeys(str(ref) for ref in self.credited_references))
        self.credited_references = references[-MAX_CREDITED_REFERENCES:]

    def credit(self, amount: int, reference: Optional[str] = None) -> bool:
        """Add *amount* points; returns False when *reference* was already credited"""
        if amount < 0:
            raise ValueError("Cannot credit a negative amount of points")
        if reference is not None:
            if reference in self.credited_references:
                return False
            self.credited_references.append(reference)
            del self.credited_references[:-MAX_CREDITED_REFERENCES]
        self.balance += amount
        return True

    def debit(self, amount: int) -> int:
        """Spend up to *amount* points; returns how many were actually spent"""
        if amount < 0:
            raise ValueError("Cannot debit a negative amount of points")
        spent = min(amount, self.balance)
        self.balance -= spent
        return spent

    def has_credited(self, reference: str) -> bool:
        return reference in self.credited_references

    @classmethod
    def restore(cls, balance: int, references: Iterable[str] = ()) -> "PointsLedger":
        return cls(balance=max(0, int(balance or 0)), credited_references=list(references or ()))
