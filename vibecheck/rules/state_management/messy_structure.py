"""Too-many-components-per-file detection."""

from __future__ import annotations

from ...models import Category, Suggestion
from ..base import RuleContext, node_line
from ..components import find_component_bindings

RULE_ID = "messy-structure"
MAX_COMPONENTS_PER_FILE = 3


def detect_messy_structure(context: RuleContext) -> list[Suggestion]:
    """Suggest splitting files that define more than three components."""
    bindings = find_component_bindings(context.ast)
    if len(bindings) <= MAX_COMPONENTS_PER_FILE:
        return []

    _name, first_node = bindings[0]
    return [
        Suggestion(
            rule=RULE_ID,
            category=Category.STATE_MANAGEMENT,
            message=(
                f"File contains {len(bindings)} component definitions - "
                "consider splitting"
            ),
            line=node_line(first_node),
            column=1,
            actionable="Split components into separate files for better organization",
        )
    ]
