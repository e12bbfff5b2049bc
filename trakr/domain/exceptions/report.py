"""Report-related domain exceptions."""

from .base import TrakrException


class InvalidTimeRangeException(TrakrException):
    """Raised when a report is requested for an unknown time range."""

    def __init__(self, time_range: str, known: list[str]):
        super().__init__(
            message=f"Unknown time range: {time_range}. Expected one of {', '.join(known)}",
            code="INVALID_TIME_RANGE",
        )
        self.time_range = time_range
