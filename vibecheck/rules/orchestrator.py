"""Runs the rule groups for one file and merges their results.

Every group runs behind its own failure boundary. A group that raises is
logged and contributes nothing; the other groups are unaffected.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..models import Category, RuleResult
from .base import RuleContext
from .component_quality import analyze_component_quality
from .performance import analyze_performance
from .state_management import analyze_state_management

logger = logging.getLogger(__name__)

RuleGroup = Callable[[RuleContext], RuleResult]

RULE_GROUPS: tuple[tuple[Category, RuleGroup], ...] = (
    (Category.STATE_MANAGEMENT, analyze_state_management),
    (Category.COMPONENT_QUALITY, analyze_component_quality),
    (Category.PERFORMANCE, analyze_performance),
)


@dataclass(frozen=True)
class GroupFailure:
    """A rule group that raised instead of returning a result."""

    category: Category
    error: Exception


def run_rule_group(
    category: Category, group: RuleGroup, context: RuleContext
) -> RuleResult | GroupFailure:
    """Run one group, turning any exception into a ``GroupFailure``."""
    try:
        return group(context)
    except Exception as e:
        logger.warning(
            f"{category.value} analysis failed for {context.filename}: {e}",
            extra={"file": context.filename, "category": category.value},
        )
        logger.debug("Rule group traceback", exc_info=True)
        return GroupFailure(category=category, error=e)


def merge_results(outcomes: Iterable[RuleResult | GroupFailure]) -> RuleResult:
    """Concatenate issues and suggestions; metrics are last-write-wins."""
    issues = []
    suggestions = []
    metrics: dict = {}
    for outcome in outcomes:
        if isinstance(outcome, GroupFailure):
            continue
        issues.extend(outcome.issues)
        suggestions.extend(outcome.suggestions)
        metrics.update(outcome.metrics)
    return RuleResult(issues=issues, suggestions=suggestions, metrics=metrics)


def run_rules(
    context: RuleContext,
    categories: Iterable[Category] | None = None,
    groups: tuple[tuple[Category, RuleGroup], ...] = RULE_GROUPS,
) -> RuleResult:
    """Run the rule groups for one file.

    Args:
        context: The file to analyze.
        categories: Restrict to these categories. ``None`` runs all groups.
        groups: ``(category, group)`` pairs, in run order.

    Returns:
        The merged issues, suggestions and metrics.
    """
    selected = set(categories) if categories is not None else None
    outcomes = [
        run_rule_group(category, group, context)
        for category, group in groups
        if selected is None or category in selected
    ]
    return merge_results(outcomes)


def parse_categories(value: str) -> set[Category]:
    """Parse a comma-separated list of category names.

    Raises:
        ValueError: If a name is not a known category.
    """
    categories: set[Category] = set()
    for name in value.split(","):
        name = name.strip()
        if not name:
            continue
        try:
            categories.add(Category(name))
        except ValueError:
            valid = ", ".join(c.value for c in Category)
            raise ValueError(
                f"Unknown rule category: {name!r}. Valid: {valid}"
            ) from None
    return categories
