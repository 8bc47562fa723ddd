"""Profile (per-wallet totals) table."""

PROFILES_DDL = """
CREATE TABLE IF NOT EXISTS profiles (
    wallet_address VARCHAR PRIMARY KEY,
    total_points DOUBLE DEFAULT 0,
    total_volume DOUBLE DEFAULT 0,
    created_at TIMESTAMP NOT NULL DEFAULT current_timestamp
)
"""
