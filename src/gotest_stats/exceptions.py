"""
Custom exceptions for gotest-stats.
"""


class StatsError(Exception):
    """Base exception for gotest-stats errors."""

    pass


class LogFileError(StatsError):
    """Raised when a log file cannot be opened or read."""

    def __init__(self, path: str, original_error: Exception):
        self.path = path
        self.original_error = original_error
        super().__init__(f"Failed to read log file {path}: {original_error}")


class RecordDecodeError(StatsError):
    """Raised when a log line is not a valid test event record."""

    def __init__(self, reason: str, path: str = "", line_number: int = 0):
        self.reason = reason
        self.path = path
        self.line_number = line_number
        if path:
            super().__init__(f"Invalid record at {path}:{line_number}: {reason}")
        else:
            super().__init__(f"Invalid record: {reason}")


class UnknownStatisticError(StatsError):
    """Raised when the requested statistic is not supported."""

    def __init__(self, statistic: str):
        self.statistic = statistic
        super().__init__(f"Unknown statistic: '{statistic}'")
