"""Mission reports: variants, payload decoding, and the dispatching factory.

Usage:
    from ground_control.reports import instantiate_report

    report = instantiate_report({"taskType": 5, "missionId": 3, "success": True})
    print(report.get_type(), report.get_summary())
"""

from ground_control.reports.factory import (
    DropCounter,
    DropHook,
    DropReason,
    build_report,
    instantiate_report,
    parse_task_type,
)
from ground_control.reports.models import (
    Component,
    EnvironmentReport,
    ImageReport,
    InstallReport,
    RepairReport,
    Report,
    ReportBase,
    SampleReport,
    TaskType,
    TopographyReport,
    task_type_name,
)
from ground_control.reports.payload import DecodedChunk, RawChunk, decode_chunk

__all__ = [
    "Component",
    "DecodedChunk",
    "DropCounter",
    "DropHook",
    "DropReason",
    "EnvironmentReport",
    "ImageReport",
    "InstallReport",
    "RawChunk",
    "RepairReport",
    "Report",
    "ReportBase",
    "SampleReport",
    "TaskType",
    "TopographyReport",
    "build_report",
    "decode_chunk",
    "instantiate_report",
    "parse_task_type",
    "task_type_name",
]
