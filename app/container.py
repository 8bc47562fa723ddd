"""Dependency Injection container - initialized at app startup."""

from loguru import logger

from app.repositories.db import close_db, get_db
from app.repositories.governance import ProposalRepository
from app.repositories.points import PointsRepository, ProfileRepository
from app.services.governance import ProposalTallyBuilder
from app.services.points import LeaderboardReader, PointsHistoryReader
from settings import STORE_BACKEND
from store_client import GovernanceClient, PointsClient

BACKENDS = ("duckdb", "supabase")


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, backend: str = STORE_BACKEND) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return
        if backend not in BACKENDS:
            raise ValueError(f"Unknown store backend {backend!r}, expected one of {BACKENDS}")

        self._clients = []
        if backend == "supabase":
            governance_store = GovernanceClient()
            points_store = profile_store = PointsClient()
            self._clients = [governance_store, points_store]
        else:
            # One connection shared by all repositories; each query opens its own cursor
            conn = get_db(read_only=True)
            governance_store = ProposalRepository(conn)
            points_store = PointsRepository(conn)
            profile_store = ProfileRepository(conn)
        self.backend = backend

        # Services (with injected stores)
        self.tally_builder = ProposalTallyBuilder(store=governance_store)
        self.points_history = PointsHistoryReader(store=points_store)
        self.leaderboard = LeaderboardReader(store=profile_store)

        self._initialized = True
        logger.info("Container initialized ({} backend)", backend)

    def close(self) -> None:
        """Release store connections and allow re-initialization."""
        for client in getattr(self, "_clients", []):
            client.close()
        if getattr(self, "backend", None) == "duckdb":
            close_db()
        self._clients = []
        self._initialized = False


# Global container instance
container = Container()
