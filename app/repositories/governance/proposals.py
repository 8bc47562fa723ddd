"""Proposal repository - proposals joined with their votes."""

from loguru import logger

from app.models.governance import Proposal, ProposalBallots
from app.repositories.base import BaseRepository


class ProposalRepository(BaseRepository):
    """Repository for proposal and vote data access."""

    def fetch_proposals_with_votes(self) -> list[ProposalBallots]:
        """Get every proposal with its ballots (choice, weight)."""
        rows = self.fetch_dicts(
            """
            SELECT p.id, p.title, p.description, p.creator_address,
                   p.status, p.ends_at, p.created_at,
                   v.id AS vote_id, v.choice, v.weight
            FROM proposals p
            LEFT JOIN votes v ON v.proposal_id = p.id
            ORDER BY p.created_at DESC, p.id, v.created_at
            """
        )

        result: dict[str, ProposalBallots] = {}
        for r in rows:
            item = result.get(r["id"])
            if item is None:
                item = result[r["id"]] = ProposalBallots(proposal=Proposal.from_row(r))
            if r["vote_id"] is not None:
                item.ballots.append({"choice": r["choice"], "weight": r["weight"]})

        logger.debug("fetch_proposals_with_votes: {} proposals, {} rows", len(result), len(rows))
        return list(result.values())
