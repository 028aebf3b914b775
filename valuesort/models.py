"""Core data models for the values sort."""

import os

from pydantic import BaseModel, ConfigDict, Field


class ValueCard(BaseModel):
    """A single value card that can be compared and ranked."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str


class ScoreRecord(BaseModel):
    """Win/loss tally for one value card.

    Records are immutable; recording an outcome replaces the record
    instead of mutating it.
    """
    model_config = ConfigDict(frozen=True)

    wins: int = 0
    losses: int = 0
    opponents: frozenset[str] = Field(default_factory=frozenset)  # ids already compared against

    @property
    def net(self) -> int:
        """Net score (wins minus losses)."""
        return self.wins - self.losses

    @property
    def comparisons(self) -> int:
        """Number of distinct opponents seen so far."""
        return len(self.opponents)


# Mapping from card id to its current record
Scores = dict[str, ScoreRecord]

# Pair of cards in display order
Pair = tuple[ValueCard, ValueCard]


class SessionConfig(BaseModel):
    """Configuration for a sorting session."""
    # Stopping
    min_comparisons: int = Field(default=20, ge=1)

    # Results summary
    top_n: int = Field(default=3, ge=1)

    @classmethod
    def from_env(cls) -> "SessionConfig":
        """Build a config from VALUESORT_* environment variables.

        Unset variables fall back to the model defaults.
        """
        overrides: dict[str, int] = {}
        if "VALUESORT_MIN_COMPARISONS" in os.environ:
            overrides["min_comparisons"] = int(os.environ["VALUESORT_MIN_COMPARISONS"])
        if "VALUESORT_TOP_N" in os.environ:
            overrides["top_n"] = int(os.environ["VALUESORT_TOP_N"])
        return cls(**overrides)
