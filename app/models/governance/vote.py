"""Vote (single ballot on a proposal) table."""

VOTES_DDL = """
CREATE TABLE IF NOT EXISTS votes (
    id VARCHAR PRIMARY KEY,
    proposal_id VARCHAR NOT NULL,
    voter_address VARCHAR NOT NULL,
    choice VARCHAR NOT NULL,
    weight DOUBLE NOT NULL,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp,
    UNIQUE (proposal_id, voter_address)
)
"""

VOTES_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_votes_proposal ON votes(proposal_id)",
]
