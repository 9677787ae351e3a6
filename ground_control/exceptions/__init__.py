"""Rover ground control exception hierarchy.

Architecture:
    GroundControlError (base)
    └── WireFormatError
        ├── MissingPayloadError
        ├── MissingTaskTypeError
        ├── UnknownTaskTypeError
        └── PayloadDecodeError

Usage:
    from ground_control.exceptions import UnknownTaskTypeError

    def parse_task_type(value: int) -> TaskType:
        try:
            return TaskType(value)
        except ValueError as exc:
            raise UnknownTaskTypeError(
                f"Unknown task type {value}",
                task_type=value,
            ) from exc
"""

from ground_control.exceptions.base import GroundControlError
from ground_control.exceptions.wire_errors import (
    MissingPayloadError,
    MissingTaskTypeError,
    PayloadDecodeError,
    UnknownTaskTypeError,
    WireFormatError,
)

__all__ = [
    "GroundControlError",
    "MissingPayloadError",
    "MissingTaskTypeError",
    "PayloadDecodeError",
    "UnknownTaskTypeError",
    "WireFormatError",
]
