"""Governance voting and points ledger core."""
