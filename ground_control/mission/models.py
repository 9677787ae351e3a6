"""Mission domain model."""

from typing import Any

from pydantic import Field, ValidationInfo, field_validator

from ground_control.logging import get_logger
from ground_control.reports import (
    DropHook,
    ImageReport,
    Report,
    ReportBase,
    instantiate_report,
    task_type_name,
)
from ground_control.reports.payload import DecodedChunk
from ground_control.wire import Coordinate, WireModel

logger = get_logger(__name__)

ON_DROP_CONTEXT_KEY = "on_drop"


class Mission(WireModel):
    """Mission snapshot with the reports received so far.

    ``reports`` lines up position by position with the raw ``reports`` array:
    an entry that could not be dispatched is kept as ``None``.

    Attributes:
        id: Mission identifier.
        id_rover: Rover assigned to the mission.
        task_type: Task the mission performs; same discriminant as reports.
        duration: Time since the mission started.
        update_frequency: Interval between rover updates.
        last_update: Timestamp of the last update.
        created_at: Timestamp of creation.
        priority: Scheduling priority.
        state: Mission state label, e.g. "In Progress".
        coordinate: Target coordinate.
        assembled_image: Server-reassembled image as base64 text, if any.
        reports: Reports in arrival order.
    """

    id: int | str | None = None
    id_rover: int | str | None = None
    task_type: int | None = None
    duration: int | float = 0
    update_frequency: int | float = 0
    last_update: str | int | None = None
    created_at: str | int | None = None
    priority: int | str = 0
    state: str | int = ""
    coordinate: Coordinate = Field(default_factory=Coordinate)
    assembled_image: str | None = None
    reports: tuple[Report | None, ...] = ()

    @field_validator("reports", mode="before")
    @classmethod
    def build_reports(cls, value: Any, info: ValidationInfo) -> tuple[Report | None, ...]:
        """Dispatch every raw entry through the report factory."""
        if not isinstance(value, list | tuple):
            logger.warning(
                "Ignoring reports that are not an array",
                extra={"reports_type": type(value).__name__},
            )
            return ()
        on_drop = (info.context or {}).get(ON_DROP_CONTEXT_KEY)
        return tuple(
            raw if isinstance(raw, ReportBase) else instantiate_report(raw, on_drop=on_drop)
            for raw in value
        )

    @classmethod
    def from_wire(cls, raw: Any, *, on_drop: DropHook | None = None) -> "Mission":
        """Create from a deserialized wire object.

        Args:
            raw: Mission object as received; None or a non-mapping yields an
                empty mission.
            on_drop: Optional hook called for every report that is dropped.
        """
        return cls.from_wire_object(raw, context={ON_DROP_CONTEXT_KEY: on_drop})

    def with_report(self, raw: Any, *, on_drop: DropHook | None = None) -> "Mission":
        """Return a copy with one more report appended.

        The raw entry goes through the same factory as construction, so an
        undispatchable entry appends None.
        """
        report = raw if isinstance(raw, ReportBase) else instantiate_report(raw, on_drop=on_drop)
        return self.model_copy(update={"reports": (*self.reports, report)})

    def valid_reports(self) -> list[Report]:
        """Return the dispatched reports in order, skipping None entries."""
        return [report for report in self.reports if report is not None]

    @property
    def is_complete(self) -> bool:
        """True once the rover has sent the terminal report."""
        return any(report.is_last_report for report in self.valid_reports())

    @property
    def task_name(self) -> str:
        return task_type_name(self.task_type)

    def assemble_image(self) -> bytes | None:
        """Join the decoded image chunks of this mission in chunk order.

        A repeated chunk id keeps the latest chunk. Chunks that failed to
        decode are skipped.

        Returns:
            The concatenated bytes, or None if no decoded chunk is present.
        """
        chunks: dict[int, bytes] = {}
        for report in self.valid_reports():
            if isinstance(report, ImageReport) and isinstance(report.payload, DecodedChunk):
                chunks[report.chunk_id] = report.payload.content
        if not chunks:
            return None
        return b"".join(chunks[chunk_id] for chunk_id in sorted(chunks))

    def to_wire(self) -> dict[str, Any]:
        """Convert back to the camelCase wire layout."""
        wire = self.model_dump(by_alias=True, mode="json", exclude={"reports"})
        wire["reports"] = [report.to_wire() if report is not None else None for report in self.reports]
        return wire
