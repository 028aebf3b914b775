"""Stateful sorting session wrapping the comparison engine.

The engine functions are pure; this class threads their state (scores,
last pair, comparison count) between user decisions and tracks which
phase the user is in. It has no presentation dependencies, so the CLI or
any other front end can drive it.
"""

from collections.abc import Sequence
from typing import Literal

from valuesort.catalog import VALUES, get_card
from valuesort.engine.pairing import select_next_pair
from valuesort.engine.ranking import format_ranking, move_item, rank_items
from valuesort.engine.scoring import init_scores, record_outcome
from valuesort.engine.stopping import FinishReason, finish_reason
from valuesort.errors import InvalidOutcomeError, SessionStateError
from valuesort.events import EventHandler, NullEventHandler
from valuesort.logging import get_logger
from valuesort.models import Pair, Scores, SessionConfig, ValueCard

Phase = Literal["intro", "sorting", "results"]

log = get_logger(__name__)


class SortSession:
    """A single values sorting session.

    Phases follow ``intro -> sorting -> results``; ``restart`` returns to
    ``intro`` with fresh scores.
    """

    def __init__(
        self,
        items: Sequence[ValueCard] = VALUES,
        config: SessionConfig | None = None,
        event_handler: EventHandler | None = None
    ):
        """Initialize the session.

        Args:
            items: Cards to rank, in their fixed order
            config: Session configuration (uses defaults if None)
            event_handler: Optional event handler (uses NullEventHandler if None)
        """
        if len(items) < 2:
            raise ValueError("At least two cards are needed to compare")

        self.items = tuple(items)
        self.config = config or SessionConfig()
        self.event_handler = event_handler or NullEventHandler()
        self._reset()

    def _reset(self) -> None:
        self.phase: Phase = "intro"
        self.scores: Scores = init_scores(self.items)
        self.comparisons = 0
        self.current_pair: Pair | None = None
        self.last_pair: Pair | None = None
        self.ranking: list[ValueCard] = []
        self.finish_reason: FinishReason | None = None

    @property
    def progress(self) -> float:
        """Percentage of the minimum comparisons completed, capped at 100."""
        return min(100.0, self.comparisons / self.config.min_comparisons * 100)

    def start(self) -> Pair:
        """Leave the intro and offer the first pair."""
        self._require_phase("intro")

        pair = select_next_pair(self.scores, None, self.items)
        # A fresh session with two or more cards always has a pair
        assert pair is not None

        self.phase = "sorting"
        self.current_pair = pair
        log.info("session_started", cards=len(self.items), min_comparisons=self.config.min_comparisons)
        self.event_handler.on_progress(
            current=self.comparisons,
            total=self.config.min_comparisons,
            message="Comparing values...",
        )
        self.event_handler.on_pair_offered(pair=pair, comparisons=self.comparisons)
        return pair

    def choose(self, winner_id: str) -> Pair | None:
        """Record the user's choice from the current pair.

        The other card of the current pair is the loser.

        Args:
            winner_id: Id of the chosen card

        Returns:
            The next pair to show, or None if the session moved to results

        Raises:
            SessionStateError: If not in the sorting phase
            InvalidOutcomeError: If the id is unknown or not part of the current pair
        """
        self._require_phase("sorting")
        assert self.current_pair is not None

        try:
            winner = get_card(winner_id, self.items)
        except KeyError:
            raise InvalidOutcomeError(f"Unknown card: {winner_id!r}") from None

        first, second = self.current_pair
        if winner not in self.current_pair:
            raise InvalidOutcomeError(
                f"{winner_id!r} is not in the current pair ({first.id!r}, {second.id!r})"
            )
        loser = second if winner == first else first

        self.scores = record_outcome(self.scores, winner, loser)
        self.comparisons += 1
        self.last_pair = (winner, loser)

        log.debug(
            "comparison_recorded",
            winner=winner.id,
            loser=loser.id,
            comparisons=self.comparisons,
        )
        self.event_handler.on_choice_recorded(
            winner=winner,
            loser=loser,
            comparisons=self.comparisons,
        )
        self.event_handler.on_progress(
            current=self.comparisons,
            total=self.config.min_comparisons,
            message="Comparing values...",
        )

        next_pair = select_next_pair(self.scores, self.last_pair, self.items)
        reason = finish_reason(self.comparisons, next_pair, self.config.min_comparisons)
        if reason is not None:
            self._finish(reason)
            return None

        self.current_pair = next_pair
        self.event_handler.on_pair_offered(pair=next_pair, comparisons=self.comparisons)
        return next_pair

    def skip(self) -> list[ValueCard]:
        """Stop comparing and rank the current (possibly partial) scores."""
        self._require_phase("sorting")
        self._finish("skipped")
        return self.ranking

    def restart(self) -> None:
        """Discard all scores and return to the intro."""
        self._reset()
        log.info("session_restarted")

    def reorder(self, from_index: int, to_index: int) -> list[ValueCard]:
        """Manually move a card within the final ranking (0-based positions)."""
        self._require_phase("results")
        self.ranking = move_item(self.ranking, from_index, to_index)
        log.debug("ranking_reordered", from_index=from_index, to_index=to_index)
        return self.ranking

    def top(self, n: int | None = None) -> list[ValueCard]:
        """Return the first ``n`` cards of the ranking (``config.top_n`` by default)."""
        self._require_phase("results")
        if n is None:
            n = self.config.top_n
        return self.ranking[:n]

    def export_text(self) -> str:
        """Plain-text export of the ranking for copying."""
        self._require_phase("results")
        return format_ranking(self.ranking)

    def _finish(self, reason: FinishReason) -> None:
        self.ranking = rank_items(self.scores, self.items)
        self.current_pair = None
        self.finish_reason = reason
        self.phase = "results"
        log.info("session_finished", reason=reason, comparisons=self.comparisons)
        self.event_handler.on_finished(ranking=list(self.ranking), reason=reason)

    def _require_phase(self, phase: Phase) -> None:
        if self.phase != phase:
            raise SessionStateError(f"Expected phase {phase!r}, session is in {self.phase!r}")
