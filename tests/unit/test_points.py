"""Tests for points history and leaderboard readers."""

from datetime import timedelta

import pytest

from app.errors import InvalidRequest, StoreError
from app.models.points import PointsTransaction
from app.services.points import LeaderboardReader, PointsHistoryReader
from tests.fakes import BASE_TIME, FakeLedgerStore, FakeProfileStore


def ledger(wallet: str, n: int, prefix: str = "t") -> list[PointsTransaction]:
    return [
        PointsTransaction(
            id=f"{prefix}{i}",
            wallet_address=wallet,
            created_at=BASE_TIME + timedelta(minutes=i),
            amount=i,
            type="trade",
        )
        for i in range(n)
    ]


class TestPointsHistory:
    def test_limit(self):
        store = FakeLedgerStore(ledger("W1", 25))
        result = PointsHistoryReader(store).get_history("W1", 10)
        assert [t.id for t in result] == [f"t{i}" for i in range(24, 14, -1)]

    def test_default_limit(self):
        store = FakeLedgerStore(ledger("W1", 25))
        result = PointsHistoryReader(store).get_history("W1")
        assert len(result) == 20
        assert result[0].id == "t24"
        assert store.calls == [("W1", 20)]

    def test_unparseable_limit_uses_default(self):
        store = FakeLedgerStore(ledger("W1", 25))
        assert len(PointsHistoryReader(store).get_history("W1", "lots")) == 20
        assert store.calls == [("W1", 20)]

    def test_string_limit(self):
        store = FakeLedgerStore(ledger("W1", 25))
        assert len(PointsHistoryReader(store).get_history("W1", "5")) == 5

    def test_zero_limit_passed_through(self):
        store = FakeLedgerStore(ledger("W1", 3))
        assert PointsHistoryReader(store).get_history("W1", 0) == []
        assert store.calls == [("W1", 0)]

    def test_only_wallet_rows_newest_first(self):
        store = FakeLedgerStore(ledger("W1", 5) + ledger("W2", 5, prefix="x"))
        result = PointsHistoryReader(store).get_history("W1", 50)
        assert len(result) == 5
        assert all(t.wallet_address == "W1" for t in result)
        stamps = [t.created_at for t in result]
        assert stamps == sorted(stamps, reverse=True)

    def test_rows_are_verbatim(self):
        rows = ledger("W1", 1)
        result = PointsHistoryReader(FakeLedgerStore(rows)).get_history("W1")
        assert result == rows

    def test_no_rows(self):
        assert PointsHistoryReader(FakeLedgerStore()).get_history("W1") == []

    @pytest.mark.parametrize("wallet", ["", None])
    def test_missing_wallet_skips_store(self, wallet):
        store = FakeLedgerStore(ledger("W1", 3))
        with pytest.raises(InvalidRequest):
            PointsHistoryReader(store).get_history(wallet, 5)
        assert store.calls == []

    def test_store_error_propagates(self):
        store = FakeLedgerStore(error=StoreError("down"))
        with pytest.raises(StoreError):
            PointsHistoryReader(store).get_history("W1")


class TestLeaderboard:
    def _rows(self):
        return [
            {"wallet_address": "A", "total_points": 10, "total_volume": 500, "created_at": BASE_TIME},
            {"wallet_address": "B", "total_points": 30, "total_volume": 100, "created_at": BASE_TIME},
            {"wallet_address": "C", "total_points": None, "total_volume": None, "created_at": None},
        ]

    def test_points_ranking(self):
        store = FakeProfileStore(self._rows())
        result = LeaderboardReader(store).get_leaderboard("points")
        assert [(e.rank, e.wallet) for e in result] == [(1, "B"), (2, "A"), (3, "C")]
        assert result[2].points == 0
        assert result[2].volume == 0
        assert store.calls == [("total_points", 50)]

    def test_volume_ranking(self):
        result = LeaderboardReader(FakeProfileStore(self._rows())).get_leaderboard("volume", 2)
        assert [e.wallet for e in result] == ["A", "B"]

    def test_default_kind(self):
        store = FakeProfileStore(self._rows())
        LeaderboardReader(store).get_leaderboard(None)
        assert store.calls[0][0] == "total_points"

    def test_limit_capped(self):
        store = FakeProfileStore(self._rows())
        LeaderboardReader(store).get_leaderboard("points", "500")
        assert store.calls == [("total_points", 100)]

    def test_invalid_kind(self):
        store = FakeProfileStore(self._rows())
        with pytest.raises(InvalidRequest):
            LeaderboardReader(store).get_leaderboard("profit")
        assert store.calls == []
