"""Points API response schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PointsTransactionItem(BaseModel):
    """Ledger row as stored."""

    id: str
    wallet_address: str
    amount: Any = None
    type: str | None = None
    description: str | None = None
    source_wallet: str | None = None
    created_at: datetime


class PointsHistoryResponse(BaseModel):
    """Recent ledger rows for a wallet."""

    wallet: str
    items: list[PointsTransactionItem]


class LeaderboardItem(BaseModel):
    """Ranked wallet."""

    model_config = ConfigDict(populate_by_name=True)

    rank: int
    wallet: str
    points: float
    volume: float
    joined_at: datetime | None = Field(default=None, alias="joinedAt")


class LeaderboardResponse(BaseModel):
    """Leaderboard of one kind."""

    type: str
    leaderboard: list[LeaderboardItem]
