from app.repositories.governance.proposals import ProposalRepository

__all__ = ["ProposalRepository"]
