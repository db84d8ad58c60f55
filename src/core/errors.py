"""Exceptions raised by the matching and assessment engine."""


class MatchEngineError(Exception):
    """Base class for engine errors."""


class PreconditionError(MatchEngineError):
    """A state transition was invoked from a state that does not allow it."""


class InvalidArgumentError(MatchEngineError, ValueError):
    """An argument is outside the range the operation accepts."""
