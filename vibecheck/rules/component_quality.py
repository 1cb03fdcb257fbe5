"""Component-quality rule group: size, unused props and complexity."""

from __future__ import annotations

from ..models import Category, Issue, RuleResult, Severity, Suggestion
from .base import RuleContext
from .components import GENERIC_PROPS, ComponentDefinition, find_components

CATEGORY = Category.COMPONENT_QUALITY

LARGE_COMPONENT_RULE = "large-component"
UNUSED_PROPS_RULE = "unused-props"
HIGH_COMPLEXITY_RULE = "high-complexity"

# Line counts only; there is no structural complexity metric.
HIGH_COMPLEXITY_LINES = 200
COMPLEXITY_SCORE_MIN_LINES = 100
COMPLEXITY_SCORE_LINES_PER_POINT = 20


def check_component_size(
    component: ComponentDefinition, context: RuleContext
) -> list[Issue]:
    max_lines = context.config.rules.max_component_lines
    if component.line_count <= max_lines:
        return []
    return [
        Issue(
            rule=LARGE_COMPONENT_RULE,
            category=CATEGORY,
            severity=context.config.severity_for(LARGE_COMPONENT_RULE, Severity.ERROR),
            message=(
                f"Large component detected ({component.line_count} lines, "
                f"max: {max_lines})"
            ),
            line=component.line_start,
            column=1,
            suggestion=(
                "Consider breaking this component into smaller, more focused "
                "components"
            ),
        )
    ]


def check_unused_props(
    component: ComponentDefinition, context: RuleContext
) -> list[Issue]:
    severity = context.config.severity_for(UNUSED_PROPS_RULE, Severity.WARNING)
    return [
        Issue(
            rule=UNUSED_PROPS_RULE,
            category=CATEGORY,
            severity=severity,
            message=f'Unused prop detected: "{prop}"',
            line=component.line_start,
            column=1,
            suggestion=f'Remove unused prop "{prop}" or use it in the component',
        )
        for prop in component.props
        if prop != GENERIC_PROPS and _is_unused(component, prop)
    ]


def _is_unused(component: ComponentDefinition, prop: str) -> bool:
    # A renamed prop is used through its alias.
    local = component.local_name(prop)
    return local is not None and local not in component.used_identifiers


def check_complexity(component: ComponentDefinition) -> list[Suggestion]:
    if component.line_count <= HIGH_COMPLEXITY_LINES:
        return []
    return [
        Suggestion(
            rule=HIGH_COMPLEXITY_RULE,
            category=CATEGORY,
            message=(
                f"Large component detected ({component.line_count} lines) - "
                "likely high complexity"
            ),
            line=component.line_start,
            column=1,
            actionable="Consider extracting logic into custom hooks or smaller components",
        )
    ]


def complexity_score(components: list[ComponentDefinition]) -> int:
    """Coarse size-based complexity estimate for a file."""
    return sum(
        c.line_count // COMPLEXITY_SCORE_LINES_PER_POINT
        for c in components
        if c.line_count > COMPLEXITY_SCORE_MIN_LINES
    )


def analyze_component_quality(context: RuleContext) -> RuleResult:
    """Run the component-quality checks for every component in one file."""
    components = find_components(context.ast)
    issues: list[Issue] = []
    suggestions: list[Suggestion] = []

    for component in components:
        issues.extend(check_component_size(component, context))
        issues.extend(check_unused_props(component, context))
        suggestions.extend(check_complexity(component))

    average_size = (
        sum(c.line_count for c in components) / len(components)
        if components
        else 0.0
    )

    return RuleResult(
        issues=issues,
        suggestions=suggestions,
        metrics={
            "component_count": len(components),
            "average_component_size": average_size,
            "complexity_score": complexity_score(components),
        },
    )
