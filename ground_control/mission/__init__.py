"""Mission entity."""

from ground_control.mission.models import Mission

__all__ = ["Mission"]
