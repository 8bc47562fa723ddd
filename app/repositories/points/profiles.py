"""Profile repository - per-wallet point and volume totals."""

from typing import Any

from loguru import logger

from app.repositories.base import BaseRepository

# Columns a leaderboard may be ordered by
ORDER_COLUMNS = ("total_points", "total_volume")


class ProfileRepository(BaseRepository):
    """Repository for profile totals."""

    def fetch_top_profiles(self, order_by: str, limit: int) -> list[dict[str, Any]]:
        """Get profiles ordered by a total column, highest first."""
        if order_by not in ORDER_COLUMNS:
            raise ValueError(f"Cannot order profiles by {order_by!r}")

        rows = self.fetch_dicts(
            f"""
            SELECT wallet_address, total_points, total_volume, created_at
            FROM profiles
            ORDER BY {order_by} DESC NULLS LAST, wallet_address
            LIMIT ?
            """,
            [limit],
        )
        logger.debug("fetch_top_profiles({}, {}): {} rows", order_by, limit, len(rows))
        return rows
