"""Unit tests for core domain models."""

import pytest
from pydantic import ValidationError

from valuesort.catalog import VALUES, get_card
from valuesort.models import ScoreRecord, SessionConfig, ValueCard

# Mark all tests in this module as unit tests
pytestmark = pytest.mark.unit


class TestValueCard:
    """Tests for ValueCard model."""

    def test_cards_are_immutable(self):
        card = ValueCard(id="x", name="X", description="Ex")
        with pytest.raises(ValidationError):
            card.name = "Y"

    def test_catalog_has_twelve_unique_cards(self):
        assert len(VALUES) == 12
        assert len({card.id for card in VALUES}) == 12
        assert VALUES[0].id == "connection"
        assert VALUES[-1].id == "fun"

    def test_get_card(self):
        assert get_card("freedom").name == "Freedom"
        with pytest.raises(KeyError):
            get_card("wealth")


class TestScoreRecord:
    """Tests for ScoreRecord model."""

    def test_defaults(self):
        record = ScoreRecord()
        assert record.wins == 0
        assert record.losses == 0
        assert record.opponents == frozenset()
        assert record.net == 0
        assert record.comparisons == 0

    def test_net_and_comparisons(self):
        record = ScoreRecord(wins=3, losses=5, opponents=frozenset({"a", "b"}))
        assert record.net == -2
        assert record.comparisons == 2


class TestSessionConfig:
    """Tests for SessionConfig."""

    def test_defaults(self):
        config = SessionConfig()
        assert config.min_comparisons == 20
        assert config.top_n == 3

    def test_rejects_zero_threshold(self):
        with pytest.raises(ValidationError):
            SessionConfig(min_comparisons=0)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("VALUESORT_MIN_COMPARISONS", "30")
        monkeypatch.setenv("VALUESORT_TOP_N", "5")
        config = SessionConfig.from_env()
        assert config.min_comparisons == 30
        assert config.top_n == 5

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("VALUESORT_MIN_COMPARISONS", raising=False)
        monkeypatch.delenv("VALUESORT_TOP_N", raising=False)
        assert SessionConfig.from_env() == SessionConfig()
