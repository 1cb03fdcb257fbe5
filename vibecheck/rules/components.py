"""Component locator.

Finds component-like definitions in a parsed file: named function
declarations and arrow functions bound to variables, whose binding name
starts with an uppercase letter.

The used-identifier set of a component is scope unaware. Every identifier
in the body counts, including ones bound in unrelated nested scopes, so it
over-approximates real usage.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import tree_sitter as ts

from ..parsing import MARKUP_ELEMENT_TYPES, ParsedAST
from .base import call_callee, is_component_name, node_line

# Recorded when the first parameter is a plain identifier, e.g. ``(props) =>``.
GENERIC_PROPS = "props"

# Node types that name something in the component body.
_IDENTIFIER_TYPES = frozenset({
    "identifier",
    "property_identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
    "type_identifier",
})

# Climbed when deciding whether an identifier is part of a markup tag name.
_TAG_NAME_PARTS = frozenset({
    "member_expression",
    "nested_identifier",
    "jsx_namespace_name",
})

_MARKUP_NAME_OWNERS = frozenset({
    "jsx_opening_element",
    "jsx_closing_element",
    "jsx_self_closing_element",
    "jsx_attribute",
})

MEMO_LIBRARY = "React"


@dataclass(frozen=True)
class ComponentDefinition:
    """A component-like definition found in one file.

    Attributes:
        name: Binding name (starts with an uppercase letter).
        node: The function node. Borrowed from the parse tree.
        line_start: First line of the function node.
        line_end: Last line of the function node.
        props: Declared prop names in order, or ``(GENERIC_PROPS,)``.
        used_identifiers: Every identifier referenced in the body.
        prop_locals: Local binding name of each prop, parallel to ``props``.
            ``None`` when a renamed prop destructures further.
        has_parameter: Whether the function declares a first parameter.
        hook_count: Calls in the body whose callee starts with ``use``.
        markup_count: Markup elements in the body.
        is_memoized: Whether the file wraps this component with ``memo``.
    """

    name: str
    node: ts.Node = field(compare=False, repr=False)
    line_start: int
    line_end: int
    props: tuple[str, ...]
    used_identifiers: frozenset[str]
    prop_locals: tuple[str | None, ...] = ()
    has_parameter: bool = False
    hook_count: int = 0
    markup_count: int = 0
    is_memoized: bool = False

    @property
    def line_count(self) -> int:
        return self.line_end - self.line_start + 1

    @property
    def has_props(self) -> bool:
        # ``({ ...rest })`` declares no prop names but still takes props.
        return self.has_parameter or len(self.props) > 0

    def local_name(self, prop: str) -> str | None:
        """Name *prop* is bound to in the body, ``heading`` for ``title: heading``."""
        if prop in self.props and len(self.prop_locals) == len(self.props):
            return self.prop_locals[self.props.index(prop)]
        return prop


def find_component_bindings(ast: ParsedAST) -> list[tuple[str, ts.Node]]:
    """Return ``(name, function_node)`` for each component-like binding.

    Results are in document order.
    """
    bindings: list[tuple[str, ts.Node]] = []

    def _visitor(node: ts.Node, _depth: int) -> None:
        if node.type == "function_declaration":
            name_node = node.child_by_field_name("name")
            if name_node is not None:
                name = ast.get_text(name_node)
                if is_component_name(name):
                    bindings.append((name, node))
        elif node.type == "variable_declarator":
            name_node = node.child_by_field_name("name")
            value_node = node.child_by_field_name("value")
            if (
                name_node is not None
                and name_node.type == "identifier"
                and value_node is not None
                and value_node.type == "arrow_function"
            ):
                name = ast.get_text(name_node)
                if is_component_name(name):
                    bindings.append((name, value_node))

    ast.walk(_visitor)
    return bindings


def find_memoized_names(ast: ParsedAST) -> frozenset[str]:
    """Names passed as the first argument to ``memo()`` or ``React.memo()``."""
    names: set[str] = set()

    def _visitor(node: ts.Node, _depth: int) -> None:
        if node.type != "call_expression":
            return
        obj, name = call_callee(ast, node)
        if name != "memo" or obj not in (None, MEMO_LIBRARY):
            return
        args_node = node.child_by_field_name("arguments")
        if args_node is None:
            return
        args = [a for a in args_node.named_children if a.type != "comment"]
        if args and args[0].type == "identifier":
            names.add(ast.get_text(args[0]))

    ast.walk(_visitor)
    return frozenset(names)


def extract_prop_bindings(
    ast: ParsedAST, function_node: ts.Node
) -> tuple[tuple[str, str | None], ...]:
    """Declared props of *function_node* paired with their local names.

    Destructured keys become props. A renamed key is bound to its alias, or
    to ``None`` when the alias is itself a pattern. A plain identifier
    parameter yields the ``GENERIC_PROPS`` sentinel; anything else yields no
    props.
    """
    param = _first_parameter(function_node)
    if param is None:
        return ()
    param = _unwrap_parameter(param)

    if param.type == "identifier":
        return ((GENERIC_PROPS, GENERIC_PROPS),)
    if param.type != "object_pattern":
        return ()

    bindings: dict[str, str | None] = {}
    for child in param.named_children:
        key: ts.Node | None = None
        local: ts.Node | None = None
        if child.type == "shorthand_property_identifier_pattern":
            key = local = child
        elif child.type == "pair_pattern":
            key = child.child_by_field_name("key")
            local = child.child_by_field_name("value")
            if local is not None:
                local = _unwrap_parameter(local)
        elif child.type == "object_assignment_pattern":
            key = local = child.child_by_field_name("left")
        # rest_pattern and computed keys are not props.
        if key is None or key.type not in (
            "shorthand_property_identifier_pattern",
            "property_identifier",
        ):
            continue
        name = ast.get_text(key)
        if name in bindings:
            continue
        if local is not None and local.type in (
            "identifier",
            "shorthand_property_identifier_pattern",
        ):
            bindings[name] = ast.get_text(local)
        else:
            bindings[name] = None
    return tuple(bindings.items())


def build_component(
    ast: ParsedAST,
    name: str,
    function_node: ts.Node,
    memoized: frozenset[str] = frozenset(),
) -> ComponentDefinition:
    """Build the ``ComponentDefinition`` for one binding."""
    used: set[str] = set()
    hooks = 0
    markup = 0

    body = function_node.child_by_field_name("body")
    if body is not None:
        def _visitor(node: ts.Node, _depth: int) -> None:
            nonlocal hooks, markup
            if node.type in _IDENTIFIER_TYPES:
                if not _is_markup_name(node):
                    used.add(ast.get_text(node))
            elif node.type in MARKUP_ELEMENT_TYPES:
                markup += 1
            elif node.type == "call_expression":
                obj, callee = call_callee(ast, node)
                if obj is None and callee is not None and callee.startswith("use"):
                    hooks += 1

        ast.walk(_visitor, body)

    prop_bindings = extract_prop_bindings(ast, function_node)
    return ComponentDefinition(
        name=name,
        node=function_node,
        line_start=node_line(function_node),
        line_end=function_node.end_point.row + 1,
        props=tuple(prop for prop, _local in prop_bindings),
        used_identifiers=frozenset(used),
        prop_locals=tuple(local for _prop, local in prop_bindings),
        has_parameter=_first_parameter(function_node) is not None,
        hook_count=hooks,
        markup_count=markup,
        is_memoized=name in memoized,
    )


def find_components(ast: ParsedAST) -> list[ComponentDefinition]:
    """Locate every component-like definition in *ast*, in document order."""
    memoized = find_memoized_names(ast)
    return [
        build_component(ast, name, node, memoized)
        for name, node in find_component_bindings(ast)
    ]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _first_parameter(function_node: ts.Node) -> ts.Node | None:
    # ``x => ...`` has a single ``parameter`` field instead of a list.
    single = function_node.child_by_field_name("parameter")
    if single is not None:
        return single
    params = function_node.child_by_field_name("parameters")
    if params is None:
        return None
    for child in params.named_children:
        if child.type != "comment":
            return child
    return None


def _unwrap_parameter(param: ts.Node) -> ts.Node:
    # TypeScript wraps parameters with their type annotation.
    if param.type in ("required_parameter", "optional_parameter"):
        pattern = param.child_by_field_name("pattern")
        if pattern is not None:
            param = pattern
    if param.type == "assignment_pattern":
        left = param.child_by_field_name("left")
        if left is not None:
            param = left
    return param


def _is_markup_name(node: ts.Node) -> bool:
    """Tag names and attribute names are markup syntax, not references."""
    parent = node.parent
    while parent is not None and parent.type in _TAG_NAME_PARTS:
        parent = parent.parent
    return parent is not None and parent.type in _MARKUP_NAME_OWNERS
