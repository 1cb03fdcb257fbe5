"""Prop-drilling detection.

A *passthrough hop* is a markup element that hands a prop to a known
component whose body never references that name. Hops are aggregated into
one chain per prop name for the whole file, so unrelated branches that
happen to share a prop name are merged into the same chain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import tree_sitter as ts

from ...models import Category, Issue, Severity
from ...parsing import MARKUP_ELEMENT_TYPES, ParsedAST
from ..base import (
    RuleContext,
    markup_attribute_name,
    markup_opening,
    markup_tag,
    node_line,
)
from ..components import find_components

logger = logging.getLogger(__name__)

RULE_ID = "prop-drilling"


@dataclass(frozen=True)
class PropHop:
    """One occurrence of a prop being passed to a component."""

    component: str
    line: int
    is_passthrough: bool


@dataclass
class PropFlowChain:
    """All hops of one prop name within a file.

    ``depth`` counts passthrough hops only.
    """

    prop_name: str
    depth: int = 0
    hops: list[PropHop] = field(default_factory=list)

    def add_hop(self, component: str, line: int, is_passthrough: bool) -> None:
        self.hops.append(PropHop(component, line, is_passthrough))
        if is_passthrough:
            self.depth += 1


def trace_prop_flows(ast: ParsedAST) -> dict[str, PropFlowChain]:
    """Build the prop flow chains of a file, keyed by prop name."""
    used_by_component = {c.name: c.used_identifiers for c in find_components(ast)}
    chains: dict[str, PropFlowChain] = {}

    def _visitor(node: ts.Node, _depth: int) -> None:
        if node.type not in MARKUP_ELEMENT_TYPES:
            return
        tag = markup_tag(node)
        if tag is None or tag.type != "identifier":
            return
        component = ast.get_text(tag)
        used = used_by_component.get(component)
        if used is None:
            return

        for attribute in markup_opening(node).named_children:
            if attribute.type != "jsx_attribute":
                continue
            prop_name = markup_attribute_name(ast, attribute)
            if prop_name is None:
                continue
            chain = chains.setdefault(prop_name, PropFlowChain(prop_name))
            chain.add_hop(component, node_line(attribute), prop_name not in used)

    ast.walk(_visitor)
    return chains


def detect_prop_drilling(context: RuleContext) -> list[Issue]:
    """Flag props passed through too many components without being used."""
    max_depth = context.config.rules.prop_drilling_depth
    severity = context.config.severity_for(RULE_ID, Severity.ERROR)
    issues: list[Issue] = []

    for chain in trace_prop_flows(context.ast).values():
        if chain.depth < max_depth:
            continue
        last_hop = chain.hops[-1]
        logger.debug(
            f"Prop {chain.prop_name!r} drilled {chain.depth} times in {context.filename}",
            extra={"file": context.filename, "rule": RULE_ID},
        )
        issues.append(
            Issue(
                rule=RULE_ID,
                category=Category.STATE_MANAGEMENT,
                severity=severity,
                message=(
                    f'Prop "{chain.prop_name}" drilled through {chain.depth} '
                    "components without usage"
                ),
                line=last_hop.line,
                column=1,
                suggestion="Use React Context or lift state to reduce prop drilling",
            )
        )

    return issues
