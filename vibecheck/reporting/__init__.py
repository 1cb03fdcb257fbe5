"""Report renderers: console text, JSON and JUnit XML."""

from __future__ import annotations

import json
import sys
from enum import Enum
from typing import TextIO

from .console import render_console, render_score_only
from .data import ReportData
from .junit import render_junit


class ReportFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"
    JUNIT = "junit"


def render_json(data: ReportData) -> str:
    return json.dumps(data.to_json_dict(), indent=2)


def generate_report(
    data: ReportData,
    report_format: ReportFormat | str = ReportFormat.CONSOLE,
    out: TextIO | None = None,
) -> None:
    """Write *data* to *out* (stdout by default) in the requested format.

    Raises:
        ValueError: If *report_format* is not a known format.
    """
    out = out or sys.stdout
    report_format = ReportFormat(report_format)
    if report_format is ReportFormat.JSON:
        out.write(render_json(data) + "\n")
    elif report_format is ReportFormat.JUNIT:
        out.write(render_junit(data))
    else:
        render_console(data, out)


__all__ = [
    "ReportData",
    "ReportFormat",
    "generate_report",
    "render_console",
    "render_json",
    "render_junit",
    "render_score_only",
]
