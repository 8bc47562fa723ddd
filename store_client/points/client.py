"""Points REST client."""

from typing import Any

from app.models.points import PointsTransaction
from store_client.base import BaseClient, parse_rows
from store_client.points.schemas import PointsTransactionSchema, ProfileSchema

PROFILE_COLUMNS = "wallet_address,total_points,total_volume,created_at"


class PointsClient(BaseClient):
    """Client for points_transactions and profiles tables."""

    def fetch_transactions(self, wallet: str, limit: int) -> list[PointsTransaction]:
        """GET /points_transactions?wallet_address=eq.{wallet}&order=created_at.desc&limit={limit}"""
        rows = self.select(
            "points_transactions",
            {
                "select": "*",
                "wallet_address": f"eq.{wallet}",
                "order": "created_at.desc",
                "limit": str(limit),
            },
        )
        return [PointsTransaction.from_row(t.model_dump()) for t in parse_rows(PointsTransactionSchema, rows)]

    def fetch_top_profiles(self, order_by: str, limit: int) -> list[dict[str, Any]]:
        """GET /profiles?order={order_by}.desc.nullslast&limit={limit}"""
        rows = self.select(
            "profiles",
            {
                "select": PROFILE_COLUMNS,
                "order": f"{order_by}.desc.nullslast",
                "limit": str(limit),
            },
        )
        return [p.model_dump() for p in parse_rows(ProfileSchema, rows)]
