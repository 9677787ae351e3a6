"""Type definitions shared across the data model."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Summarizable(Protocol):
    """Anything the presentation layer can list as a report row."""

    def get_type(self) -> str:
        """Return a short human-readable type label."""
        ...

    def get_summary(self) -> str:
        """Return a one-line human-readable summary."""
        ...


# Deserialized JSON object as handed over by the transport layer
WireObject = Mapping[str, Any]
