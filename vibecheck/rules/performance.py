"""Performance rule group: memoization and optimization hints.

These are generic hints. A component is flagged when it takes props and
looks complex; no call site is inspected for expensive computations or
unstable callback identities.
"""

from __future__ import annotations

from ..models import Category, RuleResult, Suggestion
from .base import RuleContext
from .components import ComponentDefinition, find_components

CATEGORY = Category.PERFORMANCE

MISSING_MEMO_RULE = "missing-memo"
MISSING_USEMEMO_RULE = "missing-usememo"
MISSING_USECALLBACK_RULE = "missing-usecallback"

COMPLEX_HOOK_COUNT = 2
COMPLEX_MARKUP_COUNT = 5


def is_complex(component: ComponentDefinition) -> bool:
    """More than two hook calls or more than five markup elements."""
    return (
        component.hook_count > COMPLEX_HOOK_COUNT
        or component.markup_count > COMPLEX_MARKUP_COUNT
    )


def check_missing_memo(
    component: ComponentDefinition, context: RuleContext
) -> list[Suggestion]:
    if not context.config.rules.require_memo:
        return []
    if not component.has_props or component.is_memoized or not is_complex(component):
        return []
    return [
        Suggestion(
            rule=MISSING_MEMO_RULE,
            category=CATEGORY,
            message=f'Component "{component.name}" could benefit from React.memo',
            line=component.line_start,
            column=1,
            actionable=(
                f"Wrap {component.name} with React.memo to prevent unnecessary "
                "re-renders"
            ),
        )
    ]


def check_missing_optimizations(component: ComponentDefinition) -> list[Suggestion]:
    if not component.has_props or not is_complex(component):
        return []
    return [
        Suggestion(
            rule=MISSING_USEMEMO_RULE,
            category=CATEGORY,
            message="Complex component detected - consider performance optimizations",
            line=component.line_start,
            column=1,
            actionable="Consider wrapping expensive calculations with useMemo",
        ),
        Suggestion(
            rule=MISSING_USECALLBACK_RULE,
            category=CATEGORY,
            message="Component with props detected - consider callback optimization",
            line=component.line_start,
            column=1,
            actionable="Consider wrapping callback functions with useCallback",
        ),
    ]


def analyze_performance(context: RuleContext) -> RuleResult:
    """Run the performance checks for every component in one file."""
    suggestions: list[Suggestion] = []
    for component in find_components(context.ast):
        suggestions.extend(check_missing_memo(component, context))
        suggestions.extend(check_missing_optimizations(component))
    return RuleResult(suggestions=suggestions)
