"""Governance API views - thin layer over services."""

from app.container import container

from .schemas import ProposalItem, ProposalsResponse


def get_proposals() -> ProposalsResponse:
    """Get all proposals with weighted vote tallies."""
    data = container.tally_builder.list_tallied_proposals()

    items = [
        ProposalItem(
            id=p.id,
            title=p.title,
            description=p.description,
            creator_address=p.creator_address,
            status=p.status,
            ends_at=p.ends_at,
            created_at=p.created_at,
            vote_counts=p.vote_counts,
            total_weight=p.total_weight,
            vote_count=p.vote_count,
        )
        for p in data
    ]

    return ProposalsResponse(items=items)
