"""Pair selection for value comparisons.

Picks the next pair greedily from every pair not yet compared, preferring
cards that were not just shown, cards with less exposure, and cards with a
similar standing (Swiss-style).
"""

from collections.abc import Iterator, Sequence

from valuesort.catalog import VALUES
from valuesort.models import Pair, Scores, ValueCard

# Neither card was in the previous pair (or there was no previous pair)
FRESH_PAIR_BONUS = 100
# Exactly one card was in the previous pair
PARTIAL_FRESH_BONUS = 30
# Per prior comparison involving either card
EXPOSURE_PENALTY = 2
# Per point of net-score difference between the two cards
STANDING_PENALTY = 3


def candidate_pairs(scores: Scores, items: Sequence[ValueCard] = VALUES) -> Iterator[Pair]:
    """Yield every pair that has not been compared yet, in list order."""
    for i, a in enumerate(items):
        for b in items[i + 1:]:
            if b.id not in scores[a.id].opponents:
                yield a, b


def score_pair(pair: Pair, scores: Scores, last_pair: Pair | None) -> int:
    """Compute how desirable a pair is to show next.

    Args:
        pair: Candidate pair
        scores: Current scores keyed by card id
        last_pair: Pair shown just before, or None on the first comparison

    Returns:
        Desirability score (higher is better)
    """
    a, b = pair
    record_a = scores[a.id]
    record_b = scores[b.id]

    # Freshness relative to the previous pair
    if last_pair is None:
        score = FRESH_PAIR_BONUS
    else:
        last_ids = {last_pair[0].id, last_pair[1].id}
        repeats = (a.id in last_ids) + (b.id in last_ids)
        if repeats == 0:
            score = FRESH_PAIR_BONUS
        elif repeats == 1:
            score = PARTIAL_FRESH_BONUS
        else:
            score = 0

    # Balance exposure across cards
    score -= (record_a.comparisons + record_b.comparisons) * EXPOSURE_PENALTY

    # Prefer cards with similar records
    score -= abs(record_a.net - record_b.net) * STANDING_PENALTY

    return score


def select_next_pair(
    scores: Scores,
    last_pair: Pair | None,
    items: Sequence[ValueCard] = VALUES,
) -> Pair | None:
    """Select the next pair to compare.

    Ties are broken by enumeration order, so the result is deterministic
    for a given state.

    Args:
        scores: Current scores keyed by card id
        last_pair: Pair shown just before, or None on the first comparison
        items: Cards in their fixed order

    Returns:
        The best pair, or None once every pair has been compared
    """
    best: Pair | None = None
    best_score = 0

    for pair in candidate_pairs(scores, items):
        score = score_pair(pair, scores, last_pair)
        # Strict comparison keeps the first pair on ties
        if best is None or score > best_score:
            best = pair
            best_score = score

    return best
