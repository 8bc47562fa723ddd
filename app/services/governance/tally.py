"""Proposal tally service."""

from loguru import logger

from app.models.governance import ProposalBallots, TalliedProposal, Vote
from app.repositories.stores import ProposalStore
from helpers import formulas


def tally_proposal(item: ProposalBallots) -> TalliedProposal:
    """Reduce one proposal's ballots into weighted counts.

    Raises InvalidWeight when any ballot weight is not a non-negative number.
    """
    proposal = item.proposal
    votes = [
        Vote(
            proposal_id=proposal.id,
            choice=b["choice"],
            weight=formulas.coerce_weight(b.get("weight"), proposal.id),
        )
        for b in item.ballots
    ]
    vote_counts, total_weight, vote_count = formulas.tally(votes)

    return TalliedProposal(
        **proposal.to_dict(),
        vote_counts=vote_counts,
        total_weight=total_weight,
        vote_count=vote_count,
    )


class ProposalTallyBuilder:
    """Builds the newest-first listing of proposals with vote tallies."""

    def __init__(self, store: ProposalStore):
        self._store = store
        logger.debug("ProposalTallyBuilder initialized")

    def list_tallied_proposals(self) -> list[TalliedProposal]:
        """Every proposal with vote_counts, total_weight and vote_count."""
        items = self._store.fetch_proposals_with_votes()

        result = [tally_proposal(item) for item in items]
        result.sort(key=lambda p: p.created_at, reverse=True)

        logger.info("Tallied {} proposals ({} ballots)", len(result), sum(p.vote_count for p in result))
        return result
