"""Repositories package - DuckDB data access layer."""

from app.repositories.base import BaseRepository
from app.repositories.db import (
    close_db,
    get_db,
    get_write_connection,
    init_tables,
)
from app.repositories.governance import ProposalRepository
from app.repositories.points import PointsRepository, ProfileRepository
from app.repositories.stores import LedgerStore, ProfileStore, ProposalStore

__all__ = [
    # DB
    "get_db",
    "close_db",
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    # Capabilities
    "ProposalStore",
    "LedgerStore",
    "ProfileStore",
    # Governance
    "ProposalRepository",
    # Points
    "PointsRepository",
    "ProfileRepository",
]
