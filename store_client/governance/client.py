"""Governance REST client."""

from loguru import logger

from app.models.governance import Proposal, ProposalBallots
from store_client.base import BaseClient, parse_rows
from store_client.governance.schemas import ProposalSchema

# Embedded resource: one proposal fans out to its votes
PROPOSALS_SELECT = "*,votes(choice,weight)"


class GovernanceClient(BaseClient):
    """Client for proposals and votes tables."""

    def fetch_proposals_with_votes(self) -> list[ProposalBallots]:
        """GET /proposals?select=*,votes(choice,weight)&order=created_at.desc"""
        rows = self.select("proposals", {"select": PROPOSALS_SELECT, "order": "created_at.desc"})

        result = [
            ProposalBallots(
                proposal=Proposal.from_row(p.model_dump(exclude={"votes"})),
                ballots=[v.model_dump() for v in p.votes or []],
            )
            for p in parse_rows(ProposalSchema, rows)
        ]
        logger.debug("fetch_proposals_with_votes: {} proposals", len(result))
        return result
