"""Unit tests for outcome recording."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from valuesort.catalog import VALUES
from valuesort.engine.scoring import init_scores, record_outcome
from valuesort.errors import InvalidOutcomeError, ValueSortError
from valuesort.models import ValueCard

# Mark all tests in this module as unit tests
pytestmark = pytest.mark.unit


class TestInitScores:
    """Tests for init_scores."""

    def test_one_empty_record_per_card(self):
        scores = init_scores(VALUES)
        assert list(scores) == [card.id for card in VALUES]
        for record in scores.values():
            assert record.wins == 0
            assert record.losses == 0
            assert record.opponents == frozenset()


class TestRecordOutcome:
    """Tests for record_outcome."""

    def test_winner_and_loser_updated(self):
        """A beats B: A gets a win, B a loss, both see each other."""
        a, b = VALUES[0], VALUES[1]
        scores = record_outcome(init_scores(VALUES), a, b)

        assert scores[a.id].wins == 1
        assert scores[a.id].losses == 0
        assert scores[b.id].wins == 0
        assert scores[b.id].losses == 1
        assert scores[a.id].opponents == {b.id}
        assert scores[b.id].opponents == {a.id}

    def test_other_cards_untouched(self):
        scores = record_outcome(init_scores(VALUES), VALUES[0], VALUES[1])
        for card in VALUES[2:]:
            assert scores[card.id].comparisons == 0

    def test_input_not_mutated(self):
        """Recording returns a new mapping and leaves the old one as it was."""
        before = init_scores(VALUES)
        after = record_outcome(before, VALUES[0], VALUES[1])

        assert after is not before
        assert before[VALUES[0].id].wins == 0
        assert before[VALUES[1].id].opponents == frozenset()

    def test_recording_twice_double_counts(self):
        """Recording is not idempotent."""
        a, b = VALUES[0], VALUES[1]
        scores = record_outcome(init_scores(VALUES), a, b)
        scores = record_outcome(scores, a, b)

        assert scores[a.id].wins == 2
        assert scores[b.id].losses == 2
        assert scores[a.id].opponents == {b.id}

    def test_same_card_rejected(self):
        with pytest.raises(InvalidOutcomeError):
            record_outcome(init_scores(VALUES), VALUES[0], VALUES[0])

    def test_unknown_card_rejected(self):
        stranger = ValueCard(id="wealth", name="Wealth", description="Having money")
        with pytest.raises(InvalidOutcomeError, match="wealth"):
            record_outcome(init_scores(VALUES), VALUES[0], stranger)

    def test_error_is_value_error(self):
        """Invalid outcomes are both ValueSortError and ValueError."""
        with pytest.raises(ValueError):
            record_outcome(init_scores(VALUES), VALUES[0], VALUES[0])
        assert issubclass(InvalidOutcomeError, ValueSortError)

    @given(
        outcomes=st.lists(
            st.tuples(
                st.integers(min_value=0, max_value=len(VALUES) - 1),
                st.integers(min_value=0, max_value=len(VALUES) - 1),
            ).filter(lambda t: t[0] != t[1]),
            max_size=40,
        )
    )
    @settings(max_examples=100)
    def test_opponent_sets_stay_symmetric(self, outcomes):
        """Property test: opponent sets are symmetric and never contain self."""
        scores = init_scores(VALUES)
        for winner_idx, loser_idx in outcomes:
            scores = record_outcome(scores, VALUES[winner_idx], VALUES[loser_idx])

        for card_id, record in scores.items():
            assert card_id not in record.opponents
            for opponent_id in record.opponents:
                assert card_id in scores[opponent_id].opponents

        total_wins = sum(r.wins for r in scores.values())
        total_losses = sum(r.losses for r in scores.values())
        assert total_wins == total_losses == len(outcomes)
