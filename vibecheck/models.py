"""Pydantic models for analysis results.

This module defines the records produced by the rule detectors and consumed
by the scorer and the reporters.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Category(str, Enum):
    """Rule categories. Each maps to one detector group and one score."""

    STATE_MANAGEMENT = "state-management"
    COMPONENT_QUALITY = "component-quality"
    PERFORMANCE = "performance"


CATEGORY_TITLES = {
    Category.STATE_MANAGEMENT: "State Management",
    Category.COMPONENT_QUALITY: "Component Quality",
    Category.PERFORMANCE: "Performance",
}


class Severity(str, Enum):
    """Severity levels for issues."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Issue(BaseModel):
    """A code-quality problem found by a rule.

    Attributes:
        rule: Rule identifier (e.g., ``"prop-drilling"``).
        category: The detector group that produced the issue.
        severity: ``error``, ``warning`` or ``info``.
        message: Human-readable description.
        line: 1-based line number.
        column: 1-based column.
        suggestion: Optional remediation advice.
        file: Path of the analyzed file, attached by the analyzer.
    """

    rule: str
    category: Category
    severity: Severity
    message: str
    line: int
    column: int = 1
    suggestion: str | None = None
    file: str | None = None


class Suggestion(BaseModel):
    """An improvement opportunity found by a rule.

    Attributes:
        rule: Rule identifier (e.g., ``"magic-values"``).
        category: The detector group that produced the suggestion.
        message: Human-readable description.
        line: 1-based line number.
        column: 1-based column.
        actionable: What to do about it.
        file: Path of the analyzed file, attached by the analyzer.
    """

    rule: str
    category: Category
    message: str
    line: int
    column: int = 1
    actionable: str
    file: str | None = None


class FileMetrics(BaseModel):
    """Per-file metrics gathered while running the rules."""

    component_count: int = 0
    average_component_size: float = 0.0
    total_lines: int = 0
    complexity_score: int = 0
    state_usage_count: int = 0
    prop_drilling_count: int = 0


class RuleResult(BaseModel):
    """Output of one detector group, or of the orchestrator for one file.

    ``metrics`` holds a partial mapping keyed by ``FileMetrics`` field names.
    """

    issues: list[Issue] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    metrics: dict[str, Any] = Field(default_factory=dict)


class FileAnalysis(BaseModel):
    """Final result for a single analyzed file."""

    file: str
    issues: list[Issue] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    metrics: FileMetrics = Field(default_factory=FileMetrics)


class OverallScore(BaseModel):
    """Scores for a whole run, each an integer in ``[0, 100]``."""

    total: int = Field(default=100, ge=0, le=100)
    state_management: int = Field(default=100, ge=0, le=100)
    component_quality: int = Field(default=100, ge=0, le=100)
    performance: int = Field(default=100, ge=0, le=100)
