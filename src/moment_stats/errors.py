"""Exception types raised by the statistics routines."""


class StatisticsError(ValueError):
    """Base class for recoverable statistics errors."""


class EmptyInput(StatisticsError):
    """Raised when a statistic is requested for a sample with no elements."""

    def __init__(self, message: str = "Sample is empty.") -> None:
        super().__init__(message)


class ParseError(StatisticsError):
    """Raised when numeric input cannot be parsed into a sample."""


class SampleSizeOverflow(OverflowError):
    """The element count cannot be represented by the sample's scalar type."""


class OrderOverflow(OverflowError):
    """The requested moment order exceeds the signed 32-bit range."""


__all__ = [
    "StatisticsError",
    "EmptyInput",
    "ParseError",
    "SampleSizeOverflow",
    "OrderOverflow",
]
