# backend/models.py
from dataclasses import dataclass, field
from typing import Tuple

# Anything at or below one cent is treated as settled
EPSILON = 0.01


@dataclass(frozen=True)
class Participant:
    id: str
    name: str


@dataclass(frozen=True)
class Expense:
    """A cost paid by one person and shared equally by ``shared_by``."""
    id: str
    name: str
    amount: float
    paid_by: str
    shared_by: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def share(self):
        # Empty beneficiary lists have no share; the calculator skips them
        if not self.shared_by:
            return 0.0
        return self.amount / len(self.shared_by)


@dataclass(frozen=True)
class Settlement:
    """Debtor ``from_id`` pays creditor ``to_id``."""
    from_id: str
    to_id: str
    amount: float

    def to_dict(self):
        return {"from": self.from_id, "to": self.to_id, "amount": self.amount}
