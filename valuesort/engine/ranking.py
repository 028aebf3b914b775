"""Ranking, manual reordering and export of value cards."""

from collections.abc import Sequence

from valuesort.catalog import VALUES
from valuesort.models import Scores, ValueCard


def rank_items(scores: Scores, items: Sequence[ValueCard] = VALUES) -> list[ValueCard]:
    """Rank cards by their current scores.

    Orders by net score (highest first), then by wins (highest first).
    Remaining ties keep the original card order since ``sorted`` is stable.

    Args:
        scores: Current scores keyed by card id
        items: Cards in their fixed order

    Returns:
        New list containing every card exactly once
    """
    return sorted(
        items,
        key=lambda card: (-scores[card.id].net, -scores[card.id].wins),
    )


def move_item(ranking: Sequence[ValueCard], from_index: int, to_index: int) -> list[ValueCard]:
    """Move one card to a new position, keeping the others in order.

    Raises:
        IndexError: If either index is outside the ranking
    """
    size = len(ranking)
    for index in (from_index, to_index):
        if not 0 <= index < size:
            raise IndexError(f"Position {index} out of range for {size} items")

    reordered = list(ranking)
    card = reordered.pop(from_index)
    reordered.insert(to_index, card)
    return reordered


def format_ranking(ranking: Sequence[ValueCard]) -> str:
    """Format a ranking as plain text, one ``"{rank}. {name}"`` line per card."""
    return "\n".join(f"{rank}. {card.name}" for rank, card in enumerate(ranking, 1))
