"""Rank personal values through pairwise comparisons."""

from valuesort.catalog import VALUES
from valuesort.engine import (
    MIN_COMPARISONS,
    format_ranking,
    move_item,
    rank_items,
    record_outcome,
    select_next_pair,
    should_finish,
)
from valuesort.models import ScoreRecord, SessionConfig, ValueCard
from valuesort.session import SortSession

__all__ = [
    "MIN_COMPARISONS",
    "VALUES",
    "ScoreRecord",
    "SessionConfig",
    "SortSession",
    "ValueCard",
    "format_ranking",
    "move_item",
    "rank_items",
    "record_outcome",
    "select_next_pair",
    "should_finish",
]
