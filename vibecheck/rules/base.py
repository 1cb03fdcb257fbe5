"""Shared rule context and tree helpers used by all detectors."""

from __future__ import annotations

from dataclasses import dataclass

import tree_sitter as ts

from ..config import VibeCheckConfig
from ..parsing import ParsedAST


@dataclass(frozen=True)
class RuleContext:
    """Everything a detector may look at for one file.

    Attributes:
        config: Active configuration.
        filename: Path of the file being analyzed.
        ast: Parsed tree; detectors never mutate it.
    """

    config: VibeCheckConfig
    filename: str
    ast: ParsedAST

    @property
    def source_code(self) -> str:
        return self.ast.source_code


def is_component_name(name: str) -> bool:
    """Return ``True`` if *name* follows the component naming convention.

    A component-like binding starts with an uppercase letter.
    """
    return bool(name) and name[0].isupper()


def node_line(node: ts.Node) -> int:
    """1-based line of the start of *node*."""
    return node.start_point.row + 1


def markup_opening(element: ts.Node) -> ts.Node:
    """Return the node holding the tag and attributes of a markup element."""
    if element.type == "jsx_element":
        opening = element.child_by_field_name("open_tag")
        if opening is not None:
            return opening
        for child in element.named_children:
            if child.type == "jsx_opening_element":
                return child
    return element


def markup_tag(element: ts.Node) -> ts.Node | None:
    """Return the tag name node of a markup element, if it has one."""
    opening = markup_opening(element)
    name = opening.child_by_field_name("name")
    if name is not None:
        return name
    for child in opening.named_children:
        if child.type in ("identifier", "member_expression", "nested_identifier"):
            return child
    # Fragments (<>...</>) have no tag.
    return None


def is_provider_tag(ast: ParsedAST, tag: ts.Node | None) -> bool:
    """Return ``True`` for member-access tags ending in ``.Provider``."""
    if tag is None or tag.type not in ("member_expression", "nested_identifier"):
        return False
    return ast.get_text(tag).rsplit(".", 1)[-1].strip() == "Provider"


def markup_attribute_name(ast: ParsedAST, attribute: ts.Node) -> str | None:
    """Return the plain name of a ``jsx_attribute``.

    Namespaced attributes (``xlink:href``) return ``None``.
    """
    children = attribute.named_children
    if children and children[0].type == "property_identifier":
        return ast.get_text(children[0])
    return None


def call_callee(ast: ParsedAST, call: ts.Node) -> tuple[str | None, str | None]:
    """Split the callee of a ``call_expression``.

    Returns:
        ``(None, name)`` for ``name(...)``, ``(object, property)`` for
        ``object.property(...)`` where the object is a plain identifier,
        and ``(None, None)`` for anything else.
    """
    fn_node = call.child_by_field_name("function")
    if fn_node is None:
        return None, None
    if fn_node.type == "identifier":
        return None, ast.get_text(fn_node)
    if fn_node.type == "member_expression":
        obj = fn_node.child_by_field_name("object")
        prop = fn_node.child_by_field_name("property")
        if obj is not None and prop is not None and obj.type == "identifier":
            return ast.get_text(obj), ast.get_text(prop)
    return None, None
