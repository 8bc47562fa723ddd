"""Points history service."""

from loguru import logger

from app.errors import InvalidRequest
from app.models.points import PointsTransaction
from app.repositories.stores import LedgerStore
from helpers import formulas
from settings import HISTORY_DEFAULT_LIMIT


class PointsHistoryReader:
    """Windowed, newest-first read of a wallet's points ledger."""

    def __init__(self, store: LedgerStore):
        self._store = store

    def get_history(self, wallet: str | None, limit: object = HISTORY_DEFAULT_LIMIT) -> list[PointsTransaction]:
        """Most recent transactions for ``wallet``, at most ``limit`` of them.

        The limit is not range checked here; the store applies its own cap.
        """
        if not wallet:
            raise InvalidRequest("Wallet address is required")

        limit = formulas.parse_limit(limit, HISTORY_DEFAULT_LIMIT)
        rows = self._store.fetch_transactions(wallet, limit)

        logger.info("History for {}: {} rows (limit={})", wallet, len(rows), limit)
        return rows
