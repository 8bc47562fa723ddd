"""Points repository - wallet ledger rows."""

from loguru import logger

from app.models.points import PointsTransaction
from app.repositories.base import BaseRepository


class PointsRepository(BaseRepository):
    """Repository for points transaction data access."""

    def fetch_transactions(self, wallet: str, limit: int) -> list[PointsTransaction]:
        """Get a wallet's ledger rows, newest first."""
        rows = self.fetch_dicts(
            """
            SELECT id, wallet_address, amount, type, description, source_wallet, created_at
            FROM points_transactions
            WHERE wallet_address = ?
            ORDER BY created_at DESC
            LIMIT ?
            """,
            [wallet, limit],
        )
        logger.debug("fetch_transactions({}, {}): {} rows", wallet, limit, len(rows))
        return [PointsTransaction.from_row(r) for r in rows]
