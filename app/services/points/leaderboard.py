"""Points leaderboard service."""

from loguru import logger

from app.errors import InvalidRequest
from app.models.points import LeaderboardEntry
from app.repositories.stores import ProfileStore
from helpers import formulas
from settings import LEADERBOARD_DEFAULT_LIMIT, LEADERBOARD_MAX_LIMIT

# Leaderboard kind -> profile column it ranks by
KINDS = {
    "points": "total_points",
    "volume": "total_volume",
}


class LeaderboardReader:
    """Ranks wallets by accumulated points or trading volume."""

    def __init__(self, store: ProfileStore):
        self._store = store

    def get_leaderboard(self, kind: str | None = "points", limit: object = LEADERBOARD_DEFAULT_LIMIT) -> list[LeaderboardEntry]:
        kind = kind or "points"
        if kind not in KINDS:
            raise InvalidRequest(f"Invalid leaderboard type: {kind}")

        limit = min(formulas.parse_limit(limit, LEADERBOARD_DEFAULT_LIMIT), LEADERBOARD_MAX_LIMIT)
        rows = self._store.fetch_top_profiles(KINDS[kind], limit)

        result = [
            LeaderboardEntry(
                rank=i + 1,
                wallet=r["wallet_address"],
                points=r.get("total_points") or 0,
                volume=r.get("total_volume") or 0,
                joined_at=r.get("created_at"),
            )
            for i, r in enumerate(rows)
        ]
        logger.info("Leaderboard {}: {} entries", kind, len(result))
        return result
