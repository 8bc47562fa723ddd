"""Points domain entities."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from app.models.common import BaseEntity


@dataclass
class PointsTransaction(BaseEntity):
    """One immutable row of a wallet's points ledger.

    Everything except ``wallet_address`` and ``created_at`` is opaque and
    passed through exactly as the store returned it.
    """

    id: str
    wallet_address: str
    created_at: datetime
    amount: Any = None
    type: str | None = None
    description: str | None = None
    source_wallet: str | None = None


@dataclass
class LeaderboardEntry(BaseEntity):
    """Ranked wallet on the points or volume leaderboard."""

    rank: int
    wallet: str
    points: float
    volume: float
    joined_at: datetime | None = None
