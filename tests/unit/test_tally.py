"""Tests for the proposal tally builder."""

from datetime import timedelta

import pytest

from app.errors import InvalidWeight, StoreError
from app.models.governance import TalliedProposal
from app.services.governance import ProposalTallyBuilder, tally_proposal
from tests.fakes import BASE_TIME, FakeProposalStore, ballots


class TestTallyProposal:
    def test_example(self):
        result = tally_proposal(ballots("P1", BASE_TIME, ("yes", 3), ("yes", 2), ("no", 1)))
        assert isinstance(result, TalliedProposal)
        assert result.vote_counts == {"yes": 5, "no": 1}
        assert result.total_weight == 6
        assert result.vote_count == 3

    def test_keeps_proposal_fields(self):
        result = tally_proposal(ballots("P1", BASE_TIME, ("yes", 1)))
        assert result.id == "P1"
        assert result.title == "Proposal P1"
        assert result.status == "active"
        assert result.created_at == BASE_TIME

    def test_no_votes(self):
        result = tally_proposal(ballots("P1", BASE_TIME))
        assert result.vote_counts == {}
        assert result.total_weight == 0
        assert result.vote_count == 0

    def test_string_weights(self):
        result = tally_proposal(ballots("P1", BASE_TIME, ("yes", "1.5"), ("no", "2")))
        assert result.vote_counts == {"yes": 1.5, "no": 2.0}
        assert result.total_weight == 3.5

    def test_invalid_weight_fails(self):
        with pytest.raises(InvalidWeight) as exc:
            tally_proposal(ballots("P1", BASE_TIME, ("yes", 1), ("no", "abc")))
        assert exc.value.proposal_id == "P1"


class TestProposalTallyBuilder:
    def _builder(self, *items):
        return ProposalTallyBuilder(store=FakeProposalStore(list(items)))

    def test_empty(self):
        assert self._builder().list_tallied_proposals() == []

    def test_zero_vote_proposal_is_listed(self):
        result = self._builder(
            ballots("P1", BASE_TIME, ("yes", 1)),
            ballots("P2", BASE_TIME + timedelta(hours=1)),
        ).list_tallied_proposals()

        assert [p.id for p in result] == ["P2", "P1"]
        empty = result[0]
        assert (empty.vote_counts, empty.total_weight, empty.vote_count) == ({}, 0, 0)

    def test_newest_first(self):
        result = self._builder(
            ballots("old", BASE_TIME),
            ballots("new", BASE_TIME + timedelta(days=2)),
            ballots("mid", BASE_TIME + timedelta(days=1)),
        ).list_tallied_proposals()

        assert [p.id for p in result] == ["new", "mid", "old"]
        stamps = [p.created_at for p in result]
        assert all(a >= b for a, b in zip(stamps, stamps[1:]))

    def test_invariants(self):
        result = self._builder(
            ballots("P1", BASE_TIME, ("yes", 3), ("no", 0), ("abstain", "0.25")),
            ballots("P2", BASE_TIME, ("a", 0.1), ("b", 0.2), ("a", 0.3)),
        ).list_tallied_proposals()

        for p in result:
            assert p.total_weight == sum(p.vote_counts.values())
        assert {p.id: p.vote_count for p in result} == {"P1": 3, "P2": 3}

    def test_idempotent(self):
        builder = self._builder(
            ballots("P1", BASE_TIME, ("yes", 3), ("no", 1)),
            ballots("P2", BASE_TIME + timedelta(hours=1), ("no", 2)),
        )
        assert builder.list_tallied_proposals() == builder.list_tallied_proposals()

    def test_single_round_trip(self):
        store = FakeProposalStore([ballots("P1", BASE_TIME, ("yes", 1))])
        ProposalTallyBuilder(store=store).list_tallied_proposals()
        assert store.calls == 1

    def test_invalid_weight_aborts_listing(self):
        builder = self._builder(
            ballots("P1", BASE_TIME, ("yes", 1)),
            ballots("P2", BASE_TIME, ("yes", "-4")),
        )
        with pytest.raises(InvalidWeight):
            builder.list_tallied_proposals()

    def test_store_error_propagates(self):
        builder = ProposalTallyBuilder(store=FakeProposalStore(error=StoreError("down")))
        with pytest.raises(StoreError):
            builder.list_tallied_proposals()
