"""Report factory: raw wire object to typed report.

Reports that cannot be dispatched never raise. The factory returns None,
logs the drop, and hands it to an optional hook so callers can count or
surface dropped reports.
"""

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol, assert_never

from ground_control.config import get_settings
from ground_control.constants import TASK_TYPE_KEY
from ground_control.exceptions import (
    MissingPayloadError,
    MissingTaskTypeError,
    UnknownTaskTypeError,
    WireFormatError,
)
from ground_control.logging import get_logger
from ground_control.reports.models import (
    EnvironmentReport,
    ImageReport,
    InstallReport,
    RepairReport,
    Report,
    SampleReport,
    TaskType,
    TopographyReport,
)
from ground_control.types import WireObject

logger = get_logger(__name__)


class DropReason(StrEnum):
    """Why a raw report produced no report object."""

    MISSING_PAYLOAD = "missing_payload"
    MISSING_TASK_TYPE = "missing_task_type"
    UNKNOWN_TASK_TYPE = "unknown_task_type"


_DROP_REASONS: dict[type[WireFormatError], DropReason] = {
    MissingPayloadError: DropReason.MISSING_PAYLOAD,
    MissingTaskTypeError: DropReason.MISSING_TASK_TYPE,
    UnknownTaskTypeError: DropReason.UNKNOWN_TASK_TYPE,
}


class DropHook(Protocol):
    """Callback notified for every dropped report."""

    def __call__(self, raw: Any, reason: DropReason, error: WireFormatError) -> None:
        """Handle one dropped report."""
        ...


@dataclass
class DropCounter:
    """Drop hook that tallies dropped reports by reason."""

    counts: Counter[DropReason] = field(default_factory=Counter)

    def __call__(self, raw: Any, reason: DropReason, error: WireFormatError) -> None:
        self.counts[reason] += 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())


def parse_task_type(raw: WireObject) -> TaskType:
    """Read the discriminant of a raw report.

    Zero is a valid discriminant (image capture); only a missing key or an
    explicit null counts as absent.

    Raises:
        MissingTaskTypeError: If the discriminant is absent or null.
        UnknownTaskTypeError: If it is not an integer between 0 and 5.
    """
    value = raw.get(TASK_TYPE_KEY)
    if value is None:
        value = raw.get("task_type")
    if value is None:
        raise MissingTaskTypeError("Report has no task type")

    if isinstance(value, bool) or not isinstance(value, int | float):
        raise UnknownTaskTypeError("Task type is not a number", task_type=value)
    if isinstance(value, float) and not value.is_integer():
        raise UnknownTaskTypeError("Task type is not an integer", task_type=value)

    try:
        return TaskType(int(value))
    except ValueError as exc:
        raise UnknownTaskTypeError(f"Unknown task type {value}", task_type=value) from exc


def _build_report(task_type: TaskType, raw: WireObject) -> Report:
    match task_type:
        case TaskType.IMAGE_CAPTURE:
            return ImageReport.model_validate(raw)
        case TaskType.SAMPLE_COLLECTION:
            return SampleReport.model_validate(raw)
        case TaskType.ENV_ANALYSIS:
            return EnvironmentReport.model_validate(raw)
        case TaskType.REPAIR_RESCUE:
            return RepairReport.model_validate(raw)
        case TaskType.TOPO_MAPPING:
            return TopographyReport.model_validate(raw)
        case TaskType.INSTALLATION:
            return InstallReport.model_validate(raw)
        case _:
            assert_never(task_type)


def build_report(raw: Any) -> Report:
    """Build the report variant selected by the raw object's discriminant.

    Args:
        raw: Deserialized wire object.

    Returns:
        The typed report.

    Raises:
        MissingPayloadError: If raw is absent or not a mapping.
        MissingTaskTypeError: If the discriminant is absent or null.
        UnknownTaskTypeError: If the discriminant is not a known task type.
    """
    if raw is None or not isinstance(raw, Mapping):
        raise MissingPayloadError("Report entry is empty or not an object")

    return _build_report(parse_task_type(raw), raw)


def log_dropped_report(raw: Any, reason: DropReason, error: WireFormatError) -> None:
    """Log a dropped report when enabled in settings."""
    if not get_settings().log_dropped_reports:
        return
    logger.warning(
        "Dropped report: %s",
        error.message,
        extra={
            "drop_reason": reason.value,
            "error_code": error.error_code,
            "error_context": error.context,
        },
    )


def instantiate_report(raw: Any, *, on_drop: DropHook | None = None) -> Report | None:
    """Build a report, or return None when the raw object cannot be dispatched.

    Args:
        raw: Deserialized wire object, possibly None.
        on_drop: Optional hook called for every dropped report.

    Returns:
        The typed report, or None.
    """
    try:
        return build_report(raw)
    except (MissingPayloadError, MissingTaskTypeError, UnknownTaskTypeError) as error:
        reason = _DROP_REASONS[type(error)]
        log_dropped_report(raw, reason, error)
        if on_drop is not None:
            on_drop(raw, reason, error)
        return None
