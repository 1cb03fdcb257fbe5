"""Plain-text console report."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from ..models import (
    CATEGORY_TITLES,
    Category,
    Issue,
    OverallScore,
    Severity,
    Suggestion,
)
from ..scoring import FileScore, identify_problematic_files
from .data import ReportData

RULE_WIDTH = 50


def vibe_description(score: int) -> str:
    if score >= 90:
        return "Excellent vibes!"
    if score >= 80:
        return "Great vibes!"
    if score >= 70:
        return "Good vibes!"
    if score >= 60:
        return "Decent vibes"
    if score >= 50:
        return "Mixed vibes"
    if score >= 40:
        return "Concerning vibes"
    return "Needs attention"


def score_description(score: int) -> str:
    if score >= 80:
        return "Looking good!"
    if score >= 60:
        return "Room for improvement"
    return "Needs attention"


def encouragement_message(score: int) -> str:
    if score >= 90:
        return "Outstanding! Your code has excellent vibes. Keep up the great work!"
    if score >= 80:
        return (
            "Great job! Your code has solid fundamentals with just minor "
            "improvements needed."
        )
    if score >= 70:
        return (
            "Good work! Your code is on the right track. Focus on the "
            "suggestions to level up."
        )
    if score >= 60:
        return (
            "You're getting there! Address the main issues and you'll see "
            "significant improvement."
        )
    if score >= 50:
        return "Your code needs some attention, but every issue is fixable!"
    return "Time for a refactor! Start with the critical issues and work your way through."


def progress_bar(score: int, width: int = 10) -> str:
    filled = round(score / 100 * width)
    return "[" + "#" * filled + "." * (width - filled) + "]"


def _pad(text: str, width: int) -> str:
    return text + " " * max(0, width - len(text))


def _truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def _file_name(path: str | None) -> str:
    return (path or "Unknown").rsplit("/", 1)[-1]


def _print_table(
    rows: Sequence[Sequence[str]], widths: Sequence[int], out: TextIO
) -> None:
    total = sum(w + 3 for w in widths)
    header, *body = rows
    print("-" * total, file=out)
    print(" | ".join(_pad(h, w) for h, w in zip(header, widths)), file=out)
    print("-" * total, file=out)
    for row in body:
        cells = [
            _pad(_truncate(cell, width), width) for cell, width in zip(row, widths)
        ]
        print(" | ".join(cells).rstrip(), file=out)


def _print_issues(title: str, issues: list[Issue], out: TextIO) -> None:
    widths = (40, 8, 18, 60)
    rows: list[list[str]] = [["File", "Line", "Category", "Message"]]
    for issue in issues:
        rows.append([
            _file_name(issue.file),
            f"{issue.line}:{issue.column}",
            CATEGORY_TITLES[issue.category],
            issue.message,
        ])
        if issue.suggestion:
            rows.append(["", "", "", f"-> {issue.suggestion}"])
    print(f"{title} ({len(issues)})", file=out)
    _print_table(rows, widths, out)
    print(file=out)


def _print_suggestions(
    suggestions: list[Suggestion], show_fix: bool, out: TextIO
) -> None:
    print(f"Suggestions ({len(suggestions)})", file=out)
    by_category: dict[Category, list[Suggestion]] = {}
    for suggestion in suggestions:
        by_category.setdefault(suggestion.category, []).append(suggestion)

    widths = (40, 8, 50, 50) if show_fix else (40, 8, 80)
    for category, items in by_category.items():
        print(f"\n{CATEGORY_TITLES[category]}", file=out)
        header = ["File", "Line", "Message"] + (["Action"] if show_fix else [])
        rows: list[list[str]] = [header]
        for s in items:
            row = [_file_name(s.file), f"{s.line}:{s.column}", s.message]
            if show_fix:
                row.append(s.actionable)
            rows.append(row)
        _print_table(rows, widths, out)
    print(file=out)


def _print_files_to_refactor(files: list[FileScore], out: TextIO) -> None:
    print(f"Files That Need Refactoring ({len(files)})", file=out)
    print(file=out)
    for index, f in enumerate(files, 1):
        print(f"{index}. [{f.severity.upper()}] {f.file}", file=out)
        print(
            f"   Score: {f.score}/100 | {f.error_count} errors | "
            f"{f.warning_count} warnings | {f.suggestions} suggestions",
            file=out,
        )
        if f.severity == "critical":
            print("   CRITICAL: Immediate attention required!", file=out)
        elif f.severity == "high":
            print("   HIGH: Should be refactored soon", file=out)
        print(file=out)


def _print_score_breakdown(scores: OverallScore, out: TextIO) -> None:
    print("Score Breakdown:", file=out)
    for name, score in (
        ("State Management", scores.state_management),
        ("Component Quality", scores.component_quality),
        ("Performance", scores.performance),
    ):
        print(
            f"  {name}: {score}/100 {progress_bar(score)} {score_description(score)}",
            file=out,
        )
    print(file=out)


def render_console(data: ReportData, out: TextIO | None = None) -> None:
    """Print the full human-readable report."""
    out = out or sys.stdout
    issues = [i for r in data.results for i in r.issues]
    suggestions = [s for r in data.results for s in r.suggestions]

    print(file=out)
    print("Vibe Check Results", file=out)
    print(
        f"Analyzed {data.total_files} files in {data.analysis_time_ms}ms",
        file=out,
    )
    print(file=out)

    total = data.scores.total
    print(f"Overall Score: {total}/100 ({vibe_description(total)})", file=out)
    print("=" * RULE_WIDTH, file=out)
    print(file=out)

    errors = [i for i in issues if i.severity == Severity.ERROR]
    warnings = [i for i in issues if i.severity == Severity.WARNING]
    if errors:
        _print_issues("Issues Found", errors, out)
    if warnings:
        _print_issues("Warnings", warnings, out)
    if suggestions:
        _print_suggestions(suggestions, data.show_fix, out)

    problematic = identify_problematic_files(data.results)
    if problematic:
        _print_files_to_refactor(problematic, out)

    _print_score_breakdown(data.scores, out)

    print("=" * RULE_WIDTH, file=out)
    print(encouragement_message(total), file=out)
    if issues or suggestions:
        print(file=out)
        print("Next steps:", file=out)
        critical = sum(1 for f in problematic if f.severity == "critical")
        if critical:
            plural = "s" if critical > 1 else ""
            print(f"- Start with {critical} critical file{plural} listed above", file=out)
        if issues:
            print("- Focus on fixing errors first", file=out)
        print("- Run vibecheck regularly to maintain code quality", file=out)
    print(file=out)


def render_score_only(scores: OverallScore, out: TextIO | None = None) -> None:
    print(f"Overall Score: {scores.total}/100", file=out or sys.stdout)
