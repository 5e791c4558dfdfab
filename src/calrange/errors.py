"""Exceptions raised by calrange."""

from typing import Any


class CalendarRangeError(Exception):
    """Base class for all calrange errors."""

    code = "calrange"


class InvalidParameterError(CalendarRangeError, ValueError):
    """Raised when a parameter violates a domain constraint."""

    code = "validation"

    def __init__(
        self,
        param_name: str,
        param_value: Any,
        expected: str,
        description: str | None = None,
    ) -> None:
        self.param_name = param_name
        self.param_value = param_value
        self.expected = expected
        self.description = description
        message = (
            f"The value of {param_name} is invalid. "
            f"You passed {param_value!r}, but {expected} is expected."
        )
        if description:
            message = f"{message} {description}"
        super().__init__(message)


class RangeExceededError(CalendarRangeError, ValueError):
    """Raised when negative offsets would remove every date of a range."""

    code = "range_exceeded"

    def __init__(self, start_offset: int, end_offset: int, length: int) -> None:
        self.start_offset = start_offset
        self.end_offset = end_offset
        self.length = length
        if length + end_offset < 1:
            message = (
                f"Negative end_offset ({end_offset}) exceeds the date range "
                f"length ({length})."
            )
        elif length + start_offset < 1:
            message = (
                f"Negative start_offset ({start_offset}) exceeds the date range "
                f"length ({length})."
            )
        else:
            message = (
                f"Negative values of start_offset ({start_offset}) and end_offset "
                f"({end_offset}) exceed the date range length ({length})."
            )
        super().__init__(message)


class EmptyRangeError(CalendarRangeError):
    """Raised when an operation needs a generated range but got none."""

    code = "empty_range"

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Cannot call {operation} on an empty date range. "
            "Generate a range with one of the range functions first."
        )
