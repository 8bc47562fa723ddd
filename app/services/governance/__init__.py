from app.services.governance.tally import ProposalTallyBuilder, tally_proposal

__all__ = ["ProposalTallyBuilder", "tally_proposal"]
