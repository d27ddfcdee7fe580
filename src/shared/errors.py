"""Exception types for runstreak."""


class RunStreakError(Exception):
    """Base class for all runstreak errors."""


class InvalidInputError(RunStreakError, ValueError):
    """Raised when a streak input element cannot be read as a calendar date."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid date: {value!r}")


class MalformedDurationError(RunStreakError, ValueError):
    """Raised when a duration string does not match [[H:]MM:]SS[.mmm]."""

    def __init__(self, duration: str) -> None:
        self.duration = duration
        super().__init__(f"Malformed duration: {duration!r}")


class ActivitiesFileError(RunStreakError):
    """Raised when the activities export is missing or invalid."""
