"""Proposal (governance item) table."""

PROPOSALS_DDL = """
CREATE TABLE IF NOT EXISTS proposals (
    id VARCHAR PRIMARY KEY,
    title VARCHAR NOT NULL,
    description VARCHAR,
    creator_address VARCHAR,
    status VARCHAR DEFAULT 'active',
    ends_at TIMESTAMP,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

PROPOSALS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_proposals_created ON proposals(created_at)",
]
