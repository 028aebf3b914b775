"""Comparison engine: pair selection, outcome recording and ranking."""

from valuesort.engine.pairing import select_next_pair
from valuesort.engine.ranking import format_ranking, move_item, rank_items
from valuesort.engine.scoring import init_scores, record_outcome
from valuesort.engine.stopping import MIN_COMPARISONS, finish_reason, should_finish

__all__ = [
    "MIN_COMPARISONS",
    "finish_reason",
    "format_ranking",
    "init_scores",
    "move_item",
    "rank_items",
    "record_outcome",
    "select_next_pair",
    "should_finish",
]
