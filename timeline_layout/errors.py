"""
Contract violations raised by the timeline engine.

The engine assumes well-formed input. When that assumption does not hold it
fails loudly instead of producing a wrong time range.
"""


class TimelineContractError(ValueError):
    """Raised when an input breaks a precondition of the engine."""

    pass


class InvalidTimeError(TimelineContractError):
    """Raised for a malformed HH:MM string or an out-of-day minute value."""

    pass


class UnknownPeriodError(TimelineContractError):
    """Raised when a period has no entry in the period table."""

    pass


class UnknownAnchorError(TimelineContractError):
    """Raised when a relative anchor has no entry in the anchor table."""

    pass
