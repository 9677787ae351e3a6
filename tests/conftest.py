"""Shared test fixtures."""

import base64

import pytest

from ground_control.config import get_settings
from ground_control.logging.config import get_logging_config


@pytest.fixture(autouse=True)
def _clear_environment(monkeypatch):
    """Clear environment variables and cached settings that affect behaviour."""
    env_vars_to_clear = [
        "SERVICE_NAME",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "LOG_DROPPED_REPORTS",
        "INCLUDE_TIMESTAMP",
        "INCLUDE_LOCATION",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    get_logging_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_logging_config.cache_clear()


@pytest.fixture
def image_chunk() -> bytes:
    """Binary chunk that is not valid UTF-8."""
    return bytes([0xFF, 0xD8, 0xFF, 0xE0, 0x00, 0x10, 0x4A, 0x46])


@pytest.fixture
def raw_image_report(image_chunk) -> dict:
    return {
        "taskType": 0,
        "missionId": 12,
        "chunkId": 3,
        "data": base64.b64encode(image_chunk).decode("ascii"),
        "isLastReport": False,
    }


@pytest.fixture
def raw_sample_report() -> dict:
    return {
        "taskType": 1,
        "missionId": 12,
        "numSamples": 2,
        "components": [
            {"name": "Fe", "percentage": 12.345},
            {"name": "Si", "percentage": 7},
        ],
        "isLastReport": False,
    }
