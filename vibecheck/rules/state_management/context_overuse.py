"""Context provider nesting detection."""

from __future__ import annotations

import tree_sitter as ts

from ...models import Category, Suggestion
from ...parsing import NodeVisitor, ParsedAST
from ..base import RuleContext, is_provider_tag, markup_tag, node_line

RULE_ID = "context-overuse"
MAX_PROVIDER_DEPTH = 3


class ProviderNestingVisitor(NodeVisitor):
    """Tracks how deeply ``<X.Provider>`` elements nest.

    ``max_depth_line`` is the line where ``max_depth`` was first reached.
    """

    def __init__(self, ast: ParsedAST) -> None:
        self.ast = ast
        self.depth = 0
        self.max_depth = 0
        self.max_depth_line = 1

    def _is_provider(self, element: ts.Node) -> bool:
        return is_provider_tag(self.ast, markup_tag(element))

    def enter_jsx_element(self, node: ts.Node) -> None:
        if not self._is_provider(node):
            return
        self.depth += 1
        if self.depth > self.max_depth:
            self.max_depth = self.depth
            self.max_depth_line = node_line(node)

    def exit_jsx_element(self, node: ts.Node) -> None:
        if self._is_provider(node):
            self.depth -= 1

    enter_jsx_self_closing_element = enter_jsx_element
    exit_jsx_self_closing_element = exit_jsx_element


def detect_context_overuse(context: RuleContext) -> list[Suggestion]:
    """Suggest flattening when providers nest more than three levels deep."""
    visitor = ProviderNestingVisitor(context.ast)
    context.ast.traverse(visitor)

    if visitor.max_depth <= MAX_PROVIDER_DEPTH:
        return []

    return [
        Suggestion(
            rule=RULE_ID,
            category=Category.STATE_MANAGEMENT,
            message=(
                f"Excessive Context nesting detected ({visitor.max_depth} "
                "levels deep)"
            ),
            line=visitor.max_depth_line,
            column=1,
            actionable=(
                "Consider modularizing contexts or flattening the provider "
                "structure"
            ),
        )
    ]
