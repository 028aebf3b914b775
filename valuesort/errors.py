"""Exceptions raised by the values sort."""


class ValueSortError(Exception):
    """Base class for all values sort errors."""


class InvalidOutcomeError(ValueSortError, ValueError):
    """Winner/loser input that does not describe a valid comparison."""


class SessionStateError(ValueSortError, RuntimeError):
    """Session operation called in the wrong phase."""
