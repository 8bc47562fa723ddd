"""Points transaction (ledger row) table."""

POINTS_TRANSACTIONS_DDL = """
CREATE TABLE IF NOT EXISTS points_transactions (
    id VARCHAR PRIMARY KEY,
    wallet_address VARCHAR NOT NULL,
    amount DOUBLE NOT NULL,
    type VARCHAR,
    description VARCHAR,
    source_wallet VARCHAR,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""

POINTS_TRANSACTIONS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_points_wallet ON points_transactions(wallet_address)",
]
