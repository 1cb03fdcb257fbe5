"""JUnit XML report for CI systems.

Each analyzed file is one ``<testcase>``; each error-severity issue in it
becomes a ``<failure>`` whose type is the rule id.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from ..models import Severity
from .data import ReportData

SUITE_NAME = "vibecheck"


def build_junit_tree(data: ReportData) -> ET.Element:
    failures = sum(
        1
        for result in data.results
        for issue in result.issues
        if issue.severity == Severity.ERROR
    )
    seconds = f"{data.analysis_time_ms / 1000:.3f}"

    testsuites = ET.Element(
        "testsuites",
        name=SUITE_NAME,
        tests=str(len(data.results)),
        failures=str(failures),
        time=seconds,
    )
    testsuite = ET.SubElement(
        testsuites,
        "testsuite",
        name="React Code Quality",
        tests=str(len(data.results)),
        failures=str(failures),
        time=seconds,
    )

    for result in data.results:
        testcase = ET.SubElement(
            testsuite, "testcase", name=result.file, classname=SUITE_NAME
        )
        for issue in result.issues:
            if issue.severity != Severity.ERROR:
                continue
            failure = ET.SubElement(
                testcase, "failure", message=issue.message, type=issue.rule
            )
            failure.text = issue.suggestion or ""

    return testsuites


def render_junit(data: ReportData) -> str:
    """Serialize the report as a JUnit XML document."""
    tree = build_junit_tree(data)
    ET.indent(tree)
    body = ET.tostring(tree, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"
