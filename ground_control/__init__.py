"""Rover ground control client data model."""
