"""Points REST schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class PointsTransactionSchema(BaseModel):
    """Ledger row. Amount is opaque and kept as sent."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    wallet_address: str
    created_at: datetime
    amount: Any = None
    type: str | None = None
    description: str | None = None
    source_wallet: str | None = None


class ProfileSchema(BaseModel):
    """Profile totals used by leaderboards."""

    wallet_address: str
    total_points: float | None = None
    total_volume: float | None = None
    created_at: datetime | None = None
