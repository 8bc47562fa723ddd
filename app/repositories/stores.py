"""Store capabilities the services depend on.

Both the DuckDB repositories and the Supabase REST clients satisfy these,
so services can be handed either one (or an in-memory fake in tests).
"""

from typing import Any, Protocol

from app.models.governance import ProposalBallots
from app.models.points import PointsTransaction


class ProposalStore(Protocol):
    def fetch_proposals_with_votes(self) -> list[ProposalBallots]:
        """All proposals, each with its ballot rows, in one round trip."""
        ...


class LedgerStore(Protocol):
    def fetch_transactions(self, wallet: str, limit: int) -> list[PointsTransaction]:
        """Wallet's transactions, newest first, at most ``limit`` rows."""
        ...


class ProfileStore(Protocol):
    def fetch_top_profiles(self, order_by: str, limit: int) -> list[dict[str, Any]]:
        """Profile rows ordered by ``order_by`` descending."""
        ...
