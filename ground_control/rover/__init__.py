"""Rover entity."""

from ground_control.rover.models import Rover

__all__ = ["Rover"]
