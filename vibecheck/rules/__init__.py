"""Rule engine: component locator, detectors and the per-file orchestrator."""

from ..models import Category
from .base import RuleContext, is_component_name
from .components import ComponentDefinition, find_components
from .orchestrator import GroupFailure, parse_categories, run_rules

# Rule id -> description, grouped by category.
RULE_CATALOG: dict[Category, dict[str, str]] = {
    Category.STATE_MANAGEMENT: {
        "prop-drilling": "Detects props passed through multiple components without usage",
        "context-overuse": "Identifies excessive Context Provider nesting",
        "state-chaos": "Flags components with too many state hooks",
        "magic-values": "Finds repeated string/number literals that should be constants",
        "messy-structure": "Detects files with too many component definitions",
    },
    Category.COMPONENT_QUALITY: {
        "large-component": "Flags components that exceed size limits",
        "unused-props": "Detects props that are defined but never used",
        "high-complexity": "Identifies components large enough to be overly complex",
    },
    Category.PERFORMANCE: {
        "missing-memo": "Suggests React.memo for optimization opportunities",
        "missing-usememo": "Suggests useMemo for expensive operations",
        "missing-usecallback": "Suggests useCallback for callback optimization",
    },
}

__all__ = [
    "ComponentDefinition",
    "GroupFailure",
    "RULE_CATALOG",
    "RuleContext",
    "find_components",
    "is_component_name",
    "parse_categories",
    "run_rules",
]
