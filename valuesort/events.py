"""Event system for decoupling the session from presentation.

The session emits events without knowing how (or whether) they are shown.
Front ends implement the handlers they care about.
"""

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from valuesort.models import Pair, ValueCard


class EventHandler(Protocol):
    """Protocol for handlers that receive session events."""

    def on_pair_offered(
        self,
        pair: "Pair",
        comparisons: int,
        **kwargs: Any
    ) -> None:
        """Called when a new pair is offered for comparison.

        Args:
            pair: The pair in display order
            comparisons: Comparisons completed so far
            **kwargs: Additional context
        """
        ...

    def on_choice_recorded(
        self,
        winner: "ValueCard",
        loser: "ValueCard",
        comparisons: int,
        **kwargs: Any
    ) -> None:
        """Called after a comparison outcome is recorded."""
        ...

    def on_progress(
        self,
        current: int,
        total: int,
        message: str,
        **kwargs: Any
    ) -> None:
        """Called when progress updates occur.

        Args:
            current: Comparisons completed
            total: Comparisons needed before results are shown
            message: Progress message
            **kwargs: Additional context
        """
        ...

    def on_finished(
        self,
        ranking: list["ValueCard"],
        reason: str,
        **kwargs: Any
    ) -> None:
        """Called when the session moves to the results phase.

        Args:
            ranking: Final ranking before any manual adjustment
            reason: Why sorting stopped
            **kwargs: Additional context
        """
        ...


class NullEventHandler:
    """Event handler that does nothing.

    Used as the default when no event handling is needed.
    """

    def on_pair_offered(self, *args: Any, **kwargs: Any) -> None:
        pass

    def on_choice_recorded(self, *args: Any, **kwargs: Any) -> None:
        pass

    def on_progress(self, *args: Any, **kwargs: Any) -> None:
        pass

    def on_finished(self, *args: Any, **kwargs: Any) -> None:
        pass
