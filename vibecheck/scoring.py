"""Scoring for analysis runs.

Run score: each category starts at 100 and loses 15 points per
error-severity issue and 3 points per suggestion, floored at 0. The total
is the rounded mean of the three category scores.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .models import Category, FileAnalysis, OverallScore, RuleResult, Severity

MAX_SCORE = 100
ERROR_PENALTY = 15
SUGGESTION_PENALTY = 3

# Per-file score used to rank files that need refactoring.
FILE_ERROR_PENALTY = 15
FILE_WARNING_PENALTY = 8
FILE_SUGGESTION_PENALTY = 2
MAX_PROBLEMATIC_FILES = 10


def _clamp(value: float) -> int:
    return max(0, min(MAX_SCORE, round(value)))


def calculate_score(
    results: Sequence[RuleResult | FileAnalysis], file_count: int
) -> OverallScore:
    """Aggregate per-file results into an ``OverallScore``.

    Args:
        results: Per-file rule results.
        file_count: Number of files analyzed.

    Returns:
        All scores are 100 when no file was analyzed.
    """
    if file_count == 0:
        return OverallScore()

    errors = {category: 0 for category in Category}
    suggestions = {category: 0 for category in Category}

    for result in results:
        for issue in result.issues:
            if issue.severity == Severity.ERROR:
                errors[issue.category] += 1
        for suggestion in result.suggestions:
            suggestions[suggestion.category] += 1

    scores = {
        category: _clamp(
            MAX_SCORE
            - ERROR_PENALTY * errors[category]
            - SUGGESTION_PENALTY * suggestions[category]
        )
        for category in Category
    }

    return OverallScore(
        total=_clamp(sum(scores.values()) / len(scores)),
        state_management=scores[Category.STATE_MANAGEMENT],
        component_quality=scores[Category.COMPONENT_QUALITY],
        performance=scores[Category.PERFORMANCE],
    )


@dataclass(frozen=True)
class FileScore:
    """Score and severity bucket for a single file."""

    file: str
    score: int
    issues: int
    suggestions: int
    error_count: int
    warning_count: int
    severity: str  # critical, high, medium, low


def score_file(analysis: FileAnalysis) -> FileScore:
    errors = sum(1 for i in analysis.issues if i.severity == Severity.ERROR)
    warnings = sum(1 for i in analysis.issues if i.severity == Severity.WARNING)
    suggestion_count = len(analysis.suggestions)

    score = max(
        0,
        MAX_SCORE
        - FILE_ERROR_PENALTY * errors
        - FILE_WARNING_PENALTY * warnings
        - FILE_SUGGESTION_PENALTY * suggestion_count,
    )

    if errors >= 3 or score <= 30:
        severity = "critical"
    elif errors >= 1 or score <= 50:
        severity = "high"
    elif warnings >= 2 or score <= 70:
        severity = "medium"
    else:
        severity = "low"

    return FileScore(
        file=analysis.file,
        score=score,
        issues=len(analysis.issues),
        suggestions=suggestion_count,
        error_count=errors,
        warning_count=warnings,
        severity=severity,
    )


def identify_problematic_files(results: Sequence[FileAnalysis]) -> list[FileScore]:
    """Files scoring 70 or less, or with errors; worst first, at most ten."""
    scored = [score_file(r) for r in results]
    flagged = [s for s in scored if s.score <= 70 or s.error_count > 0]
    flagged.sort(key=lambda s: s.score)
    return flagged[:MAX_PROBLEMATIC_FILES]
