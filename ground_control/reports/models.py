"""Report variants produced by a rover during a mission.

The set of variants is closed and keyed by :class:`TaskType`. Every variant
implements :class:`~ground_control.types.Summarizable`.
"""

from enum import IntEnum
from typing import Any, ClassVar

from pydantic import Field, field_validator

from ground_control.constants import COORDINATE_DECIMAL_PLACES, TASK_TYPE_KEY
from ground_control.reports.formatting import completion_marker, format_fixed
from ground_control.reports.payload import ChunkPayload, decode_chunk
from ground_control.wire import WireModel


class TaskType(IntEnum):
    """Report and mission discriminant."""

    IMAGE_CAPTURE = 0
    SAMPLE_COLLECTION = 1
    ENV_ANALYSIS = 2
    REPAIR_RESCUE = 3
    TOPO_MAPPING = 4
    INSTALLATION = 5

    @property
    def mission_name(self) -> str:
        return _MISSION_NAMES[self]


_MISSION_NAMES: dict[TaskType, str] = {
    TaskType.IMAGE_CAPTURE: "Image_Capture",
    TaskType.SAMPLE_COLLECTION: "Object_Sample",
    TaskType.ENV_ANALYSIS: "Environmental_Analysis",
    TaskType.REPAIR_RESCUE: "Rescue",
    TaskType.TOPO_MAPPING: "Mapping",
    TaskType.INSTALLATION: "Object_Installation",
}


def task_type_name(value: Any) -> str:
    """Return the mission name for a raw task type, or ``Unknown``."""
    try:
        return TaskType(value).mission_name
    except ValueError:
        return "Unknown"


class ReportBase(WireModel):
    """Fields shared by every report variant.

    Attributes:
        mission_id: Mission the report belongs to (back reference only).
        is_last_report: True on the terminal report of a multi-part sequence.
    """

    task_type: ClassVar[TaskType]
    type_label: ClassVar[str]

    mission_id: int | str | None = None
    is_last_report: bool = False

    def get_type(self) -> str:
        return self.type_label

    def get_summary(self) -> str:
        raise NotImplementedError

    def to_wire(self) -> dict[str, Any]:
        return {TASK_TYPE_KEY: int(self.task_type), **super().to_wire()}

    def __str__(self) -> str:
        return f"[{self.get_type()}] Mission {self.mission_id} - {self.get_summary()}".rstrip()


class ImageReport(ReportBase):
    """One chunk of an image transfer.

    ``payload`` keeps decoded bytes apart from text that failed to decode;
    ``assembled_image`` is the server-side reassembly, passed through as
    base64 text.
    """

    task_type: ClassVar[TaskType] = TaskType.IMAGE_CAPTURE
    type_label: ClassVar[str] = "Image"

    chunk_id: int = 0
    payload: ChunkPayload | None = Field(default=None, alias="data")
    assembled_image: str | None = None

    @field_validator("payload", mode="before")
    @classmethod
    def decode_payload(cls, value: Any) -> Any:
        return decode_chunk(value)

    @property
    def data(self) -> bytes | str | None:
        """Chunk bytes, or the original text when decoding failed."""
        if self.payload is None:
            return None
        if self.payload.kind == "decoded":
            return self.payload.content
        return self.payload.text

    @property
    def byte_length(self) -> int:
        return self.payload.size if self.payload is not None else 0

    def get_summary(self) -> str:
        marker = completion_marker(self.is_last_report)
        return f"Chunk #{self.chunk_id} ({self.byte_length} bytes) {marker}"

    def to_wire(self) -> dict[str, Any]:
        wire = {TASK_TYPE_KEY: int(self.task_type), **self.model_dump(by_alias=True, exclude={"payload"})}
        wire["data"] = self.payload.to_wire() if self.payload is not None else None
        return wire


class Component(WireModel):
    """Chemical component of a collected sample."""

    name: str = ""
    percentage: float = 0.0


class SampleReport(ReportBase):
    """Chemical composition of collected samples."""

    task_type: ClassVar[TaskType] = TaskType.SAMPLE_COLLECTION
    type_label: ClassVar[str] = "Sample"

    num_samples: int = 0
    components: tuple[Component, ...] = ()

    @field_validator("components", mode="before")
    @classmethod
    def skip_null_components(cls, value: Any) -> Any:
        if isinstance(value, list | tuple):
            return tuple(item for item in value if item is not None)
        return value

    def get_summary(self) -> str:
        parts = ", ".join(f"{component.name}={format_fixed(component.percentage)}%" for component in self.components)
        marker = completion_marker(self.is_last_report)
        return f"{self.num_samples} components: [{parts}] {marker}"


class EnvironmentReport(ReportBase):
    """Atmospheric measurements."""

    task_type: ClassVar[TaskType] = TaskType.ENV_ANALYSIS
    type_label: ClassVar[str] = "Environment"

    temp: float = 0.0
    oxygen: float = 0.0
    pressure: float = 0.0
    humidity: float = 0.0
    wind_speed: float = 0.0
    radiation: float = 0.0

    def get_summary(self) -> str:
        readings = ", ".join(
            [
                f"T={format_fixed(self.temp)}°C",
                f"O2={format_fixed(self.oxygen)}%",
                f"P={format_fixed(self.pressure)}hPa",
                f"H={format_fixed(self.humidity)}%",
                f"V={format_fixed(self.wind_speed)}m/s",
                f"R={format_fixed(self.radiation)}µSv",
            ]
        )
        return f"{readings} {completion_marker(self.is_last_report)}"


class RepairReport(ReportBase):
    """Outcome of a repair or rescue attempt."""

    task_type: ClassVar[TaskType] = TaskType.REPAIR_RESCUE
    type_label: ClassVar[str] = "Repair"

    problem_id: int = 0
    repairable: bool = False

    def get_summary(self) -> str:
        status = "✓ Repaired" if self.repairable else "✗ Not repairable"
        return f"Problem #{self.problem_id} - {status} {completion_marker(self.is_last_report)}"


class TopographyReport(ReportBase):
    """Single surveyed point."""

    task_type: ClassVar[TaskType] = TaskType.TOPO_MAPPING
    type_label: ClassVar[str] = "Topography"

    latitude: float = 0.0
    longitude: float = 0.0
    height: float = 0.0

    def get_summary(self) -> str:
        latitude = format_fixed(self.latitude, COORDINATE_DECIMAL_PLACES)
        longitude = format_fixed(self.longitude, COORDINATE_DECIMAL_PLACES)
        marker = completion_marker(self.is_last_report)
        return f"({latitude}°, {longitude}°) h={format_fixed(self.height)}m {marker}"


class InstallReport(ReportBase):
    """Success or failure of an instrument installation."""

    task_type: ClassVar[TaskType] = TaskType.INSTALLATION
    type_label: ClassVar[str] = "Install"

    success: bool = False

    def get_summary(self) -> str:
        status = "✓ Success" if self.success else "✗ Failed"
        return f"{status} {completion_marker(self.is_last_report)}"


Report = ImageReport | SampleReport | EnvironmentReport | RepairReport | TopographyReport | InstallReport
