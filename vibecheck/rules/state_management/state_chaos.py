"""Excessive local state detection."""

from __future__ import annotations

from dataclasses import dataclass

import tree_sitter as ts

from ...models import Category, Suggestion
from ...parsing import ParsedAST
from ..base import RuleContext, call_callee, is_component_name, node_line

RULE_ID = "state-chaos"
STATE_HOOKS = frozenset({"useState", "useReducer"})
MAX_STATE_HOOKS = 5


@dataclass
class _StateUsage:
    count: int = 0
    line: int = 0


def enclosing_component_name(ast: ParsedAST, node: ts.Node) -> str | None:
    """Name of the function that directly encloses *node*.

    Only function declarations and arrow functions bound to a variable have
    a name. Function expressions, methods and generators give ``None``.
    """
    function = ast.find_enclosing_function(node)
    if function is None:
        return None

    if function.type == "function_declaration":
        name_node = function.child_by_field_name("name")
        if name_node is not None:
            return ast.get_text(name_node)
    elif function.type == "arrow_function":
        parent = function.parent
        if parent is not None and parent.type == "variable_declarator":
            name_node = parent.child_by_field_name("name")
            if name_node is not None and name_node.type == "identifier":
                return ast.get_text(name_node)
    return None


def count_state_hooks(ast: ParsedAST) -> dict[str, _StateUsage]:
    """Count state hook calls per component, keeping the last call's line."""
    usage: dict[str, _StateUsage] = {}

    def _visitor(node: ts.Node, _depth: int) -> None:
        if node.type != "call_expression":
            return
        obj, callee = call_callee(ast, node)
        if obj is not None or callee not in STATE_HOOKS:
            return
        name = enclosing_component_name(ast, node)
        if name is None or not is_component_name(name):
            return
        state = usage.setdefault(name, _StateUsage())
        state.count += 1
        state.line = node_line(node)

    ast.walk(_visitor)
    return usage


def detect_state_chaos(context: RuleContext) -> list[Suggestion]:
    """Suggest consolidation for components with more than five state hooks."""
    suggestions: list[Suggestion] = []

    for name, state in count_state_hooks(context.ast).items():
        if state.count <= MAX_STATE_HOOKS:
            continue
        suggestions.append(
            Suggestion(
                rule=RULE_ID,
                category=Category.STATE_MANAGEMENT,
                message=(
                    f'Component "{name}" has {state.count} state hooks - '
                    "consider consolidation"
                ),
                line=state.line,
                column=1,
                actionable="Consolidate related state into useReducer or custom hooks",
            )
        )

    return suggestions
