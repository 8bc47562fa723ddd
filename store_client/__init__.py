"""Supabase REST store client package."""

from store_client.base import BaseClient, parse_rows
from store_client.governance import GovernanceClient
from store_client.points import PointsClient

__all__ = [
    # Base
    "BaseClient",
    "parse_rows",
    # Clients
    "GovernanceClient",
    "PointsClient",
]
