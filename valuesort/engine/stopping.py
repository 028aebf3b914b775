"""Termination policy for a sorting session."""

from typing import Literal

from valuesort.models import Pair

# Enough rounds for 12 cards to separate under Swiss-style pairing
MIN_COMPARISONS = 20

FinishReason = Literal["pairs_exhausted", "min_comparisons", "skipped"]


def finish_reason(
    comparisons: int,
    next_pair: Pair | None,
    min_comparisons: int = MIN_COMPARISONS,
) -> FinishReason | None:
    """Decide whether the session should end after a comparison.

    Args:
        comparisons: Number of comparisons completed so far
        next_pair: Pair the selector would offer next
        min_comparisons: Comparisons after which results are shown

    Returns:
        Why the session ends, or None if it should continue
    """
    if next_pair is None:
        return "pairs_exhausted"
    if comparisons >= min_comparisons:
        return "min_comparisons"
    return None


def should_finish(
    comparisons: int,
    next_pair: Pair | None,
    min_comparisons: int = MIN_COMPARISONS,
) -> bool:
    """Check whether the session should end after a comparison."""
    return finish_reason(comparisons, next_pair, min_comparisons) is not None
