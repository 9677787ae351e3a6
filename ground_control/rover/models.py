"""Rover telemetry snapshot model."""

from typing import Any

from pydantic import Field

from ground_control.reports.formatting import format_fixed
from ground_control.wire import Coordinate, WireModel


class Rover(WireModel):
    """Point-in-time telemetry of a rover.

    Snapshots are never patched: each update from the transport layer
    builds a new instance with :meth:`from_wire`.
    """

    id: int | str | None = None
    state: str | int = ""
    battery: float = 0.0
    speed: float = 0.0
    position: Coordinate = Field(default_factory=Coordinate)
    update_frequency: int = 0
    missed_telemetry: int = 0

    @classmethod
    def from_wire(cls, raw: Any) -> "Rover":
        """Create from a deserialized wire object; None or a non-mapping yields an empty snapshot."""
        return cls.from_wire_object(raw)

    def __str__(self) -> str:
        return (
            f"Rover {self.id} | State: {self.state} | Battery: {format_fixed(self.battery, 0)}% "
            f"| Speed: {format_fixed(self.speed)} m/s"
        )
