"""Errors raised while shaping raw wire data.

None of these cross the model layer: the report factory turns them into a
``None`` report and the payload decoder into a raw-text fallback.
"""

from typing import Any, ClassVar

from ground_control.exceptions.base import GroundControlError


class WireFormatError(GroundControlError):
    """Base class for malformed or unrecognized wire data."""

    error_code: ClassVar[str] = "WIRE_FORMAT_ERROR"


class MissingPayloadError(WireFormatError):
    """Report entry is absent or not a mapping."""

    error_code: ClassVar[str] = "MISSING_PAYLOAD"


class MissingTaskTypeError(WireFormatError):
    """Report entry carries no task type discriminant."""

    error_code: ClassVar[str] = "MISSING_TASK_TYPE"


class UnknownTaskTypeError(WireFormatError):
    """Report discriminant is not one of the known task types."""

    error_code: ClassVar[str] = "UNKNOWN_TASK_TYPE"

    def __init__(
        self,
        message: str,
        *,
        task_type: Any = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the offending discriminant.

        Args:
            message: Description of the failure.
            task_type: The discriminant value received.
            context: Additional context information.
        """
        context_dict = context or {}
        if task_type is not None:
            context_dict["task_type"] = task_type
        super().__init__(message, context=context_dict)


class PayloadDecodeError(WireFormatError):
    """Image chunk text is not valid base64."""

    error_code: ClassVar[str] = "PAYLOAD_DECODE_ERROR"
