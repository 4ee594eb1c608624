"""Exceptions raised by the status history kernel."""


class StatusHistoryError(Exception):
    """Base exception for status history errors."""
    pass


class InvalidFilterError(StatusHistoryError):
    """Raised when a history filter does not select exactly one range."""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"invalid status history filter: {reason}")


class EmptyWindowError(StatusHistoryError):
    """Raised when a sliding window with no slots is pushed to."""
    def __init__(self):
        super().__init__("cannot push into an empty window")


class InvalidCycleSizeError(StatusHistoryError):
    """Raised when squashing is asked for a cycle shorter than one record."""
    def __init__(self, cycle_size):
        self.cycle_size = cycle_size
        super().__init__(f"cycle size must be a positive integer, got {cycle_size!r}")
