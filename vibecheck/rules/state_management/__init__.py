"""State-management rule group."""

from ...models import Category, RuleResult
from ..base import RuleContext
from .context_overuse import detect_context_overuse
from .magic_values import detect_magic_values
from .messy_structure import detect_messy_structure
from .prop_drilling import detect_prop_drilling
from .state_chaos import RULE_ID as STATE_CHAOS_RULE
from .state_chaos import detect_state_chaos

CATEGORY = Category.STATE_MANAGEMENT


def analyze_state_management(context: RuleContext) -> RuleResult:
    """Run the state-management detectors for one file."""
    issues = detect_prop_drilling(context)

    suggestions = []
    suggestions.extend(detect_context_overuse(context))
    suggestions.extend(detect_state_chaos(context))
    suggestions.extend(detect_magic_values(context))
    suggestions.extend(detect_messy_structure(context))

    return RuleResult(
        issues=issues,
        suggestions=suggestions,
        metrics={
            "prop_drilling_count": len(issues),
            "state_usage_count": sum(
                1 for s in suggestions if s.rule == STATE_CHAOS_RULE
            ),
        },
    )


__all__ = [
    "CATEGORY",
    "analyze_state_management",
    "detect_context_overuse",
    "detect_magic_values",
    "detect_messy_structure",
    "detect_prop_drilling",
    "detect_state_chaos",
]
