"""Seed helpers and in-memory fake stores for tests."""

from datetime import datetime, timedelta

from app.models.governance import Proposal, ProposalBallots

BASE_TIME = datetime(2026, 3, 1, 12, 0, 0)


def insert_proposal(conn, pid: str, created_at: datetime, title: str = "Proposal", status: str = "active"):
    conn.execute(
        "INSERT INTO proposals (id, title, description, creator_address, status, ends_at, created_at) VALUES (?, ?, ?, ?, ?, ?, ?)",
        [pid, title, f"{title} body", "CREATOR", status, created_at + timedelta(days=7), created_at],
    )


def insert_vote(conn, vid: str, pid: str, voter: str, choice: str, weight: float, created_at: datetime = BASE_TIME):
    conn.execute(
        "INSERT INTO votes (id, proposal_id, voter_address, choice, weight, created_at) VALUES (?, ?, ?, ?, ?, ?)",
        [vid, pid, voter, choice, weight, created_at],
    )


def insert_transaction(conn, tid: str, wallet: str, amount: float, created_at: datetime, type_: str = "trade"):
    conn.execute(
        "INSERT INTO points_transactions (id, wallet_address, amount, type, description, source_wallet, created_at) VALUES (?, ?, ?, ?, ?, ?, ?)",
        [tid, wallet, amount, type_, f"{type_} reward", None, created_at],
    )


def insert_profile(conn, wallet: str, points: float | None, volume: float | None, created_at: datetime = BASE_TIME):
    conn.execute(
        "INSERT INTO profiles (wallet_address, total_points, total_volume, created_at) VALUES (?, ?, ?, ?)",
        [wallet, points, volume, created_at],
    )


class FakeProposalStore:
    """In-memory ProposalStore counting round trips."""

    def __init__(self, items: list[ProposalBallots] | None = None, error: Exception | None = None):
        self.items = items or []
        self.error = error
        self.calls = 0

    def fetch_proposals_with_votes(self) -> list[ProposalBallots]:
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.items)


class FakeLedgerStore:
    """In-memory LedgerStore honoring filter, order and limit."""

    def __init__(self, rows=None, error: Exception | None = None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    def fetch_transactions(self, wallet: str, limit: int):
        self.calls.append((wallet, limit))
        if self.error:
            raise self.error
        rows = sorted((r for r in self.rows if r.wallet_address == wallet), key=lambda r: r.created_at, reverse=True)
        return rows[: max(limit, 0)]


class FakeProfileStore:
    def __init__(self, rows=None):
        self.rows = rows or []
        self.calls = []

    def fetch_top_profiles(self, order_by: str, limit: int):
        self.calls.append((order_by, limit))
        return sorted(self.rows, key=lambda r: r.get(order_by) or 0, reverse=True)[:limit]


def ballots(pid: str, created_at: datetime, *votes: tuple) -> ProposalBallots:
    """ProposalBallots from (choice, weight) pairs."""
    return ProposalBallots(
        proposal=Proposal(id=pid, created_at=created_at, title=f"Proposal {pid}", status="active"),
        ballots=[{"choice": c, "weight": w} for c, w in votes],
    )
