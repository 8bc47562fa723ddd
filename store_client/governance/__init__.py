"""Governance REST client."""

from store_client.governance.client import GovernanceClient
from store_client.governance.schemas import ProposalSchema, VoteSchema

__all__ = [
    "GovernanceClient",
    "ProposalSchema",
    "VoteSchema",
]
