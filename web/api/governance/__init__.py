"""Governance API."""

from web.api.governance.views import get_proposals

__all__ = [
    "get_proposals",
]
