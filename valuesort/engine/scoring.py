"""Pure win/loss bookkeeping for value comparisons."""

from collections.abc import Iterable

from valuesort.errors import InvalidOutcomeError
from valuesort.models import ScoreRecord, Scores, ValueCard


def init_scores(items: Iterable[ValueCard]) -> Scores:
    """Create an empty score record for every card."""
    return {card.id: ScoreRecord() for card in items}


def record_outcome(scores: Scores, winner: ValueCard, loser: ValueCard) -> Scores:
    """Record a single comparison and return the updated scores.

    The input mapping is left untouched. Calling this twice for the same
    decision counts it twice, so callers must record each decision once.

    Args:
        scores: Current scores keyed by card id
        winner: Card the user chose
        loser: The other card of the offered pair

    Returns:
        New scores mapping with both records replaced

    Raises:
        InvalidOutcomeError: If winner and loser are the same card or
            either is not part of the scored set
    """
    if winner.id == loser.id:
        raise InvalidOutcomeError(f"A card cannot be compared with itself: {winner.id!r}")
    for card in (winner, loser):
        if card.id not in scores:
            raise InvalidOutcomeError(f"Unknown card: {card.id!r}")

    winner_record = scores[winner.id]
    loser_record = scores[loser.id]

    updated = dict(scores)
    updated[winner.id] = winner_record.model_copy(
        update={
            "wins": winner_record.wins + 1,
            "opponents": winner_record.opponents | {loser.id},
        }
    )
    updated[loser.id] = loser_record.model_copy(
        update={
            "losses": loser_record.losses + 1,
            "opponents": loser_record.opponents | {winner.id},
        }
    )
    return updated
