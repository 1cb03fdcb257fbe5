"""Repeated literal ("magic value") detection."""

from __future__ import annotations

import tree_sitter as ts

from ...models import Category, Suggestion
from ...parsing import ParsedAST
from ..base import RuleContext, node_line

RULE_ID = "magic-values"
MIN_OCCURRENCES = 3
MIN_STRING_LENGTH = 3

IGNORED_STRINGS = frozenset({"", " ", "true", "false"})
IGNORED_NUMBERS = frozenset({10.0, 100.0})
MAX_IGNORED_NUMBER = 2

# Strings directly under these nodes are markup attribute values or import
# sources, not magic values.
_EXEMPT_STRING_PARENTS = frozenset({"jsx_attribute", "import_statement"})


# Single-character escapes that do not stand for themselves.
_SIMPLE_ESCAPES = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "0": "\0",
}
_LINE_CONTINUATIONS = ("\n", "\r", "\u2028", "\u2029")


def _decode_escape(sequence: str) -> str:
    """Decode one backslash escape sequence, e.g. ``\\'`` or ``\\u0041``."""
    body = sequence[1:]
    if not body:
        return sequence
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    if body.startswith(_LINE_CONTINUATIONS):
        return ""
    try:
        if body.startswith("u{"):
            return chr(int(body[2:-1], 16))
        if body[0] in ("u", "x") and len(body) > 1:
            return chr(int(body[1:], 16))
    except ValueError:
        return sequence
    return body


def _string_value(ast: ParsedAST, node: ts.Node) -> str:
    """The value of a string literal with escape sequences decoded."""
    parts: list[str] = []
    for child in node.named_children:
        text = ast.get_text(child)
        if child.type == "escape_sequence":
            parts.append(_decode_escape(text))
        elif child.type != "comment":
            parts.append(text)
    return "".join(parts)


def _numeric_value(text: str) -> float | None:
    clean = text.replace("_", "").lower()
    if clean.endswith("n"):
        # BigInt literal
        return None
    try:
        if clean.startswith(("0x", "0o", "0b")):
            return float(int(clean, 0))
        return float(clean)
    except ValueError:
        return None


def format_number(value: float) -> str:
    """Render a numeric literal value the way it is usually written."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def collect_literals(ast: ParsedAST) -> dict[tuple[str, object], list[tuple[int, str]]]:
    """Group qualifying literals by kind and exact value.

    Returns:
        Mapping of ``(kind, value)`` to ``(line, display)`` occurrences,
        in order of first appearance.
    """
    literals: dict[tuple[str, object], list[tuple[int, str]]] = {}

    def _visitor(node: ts.Node, _depth: int) -> bool | None:
        if node.type == "string":
            parent = node.parent
            if parent is not None and parent.type in _EXEMPT_STRING_PARENTS:
                return False
            value = _string_value(ast, node)
            if len(value) >= MIN_STRING_LENGTH and value not in IGNORED_STRINGS:
                literals.setdefault(("string", value), []).append(
                    (node_line(node), value)
                )
            return False
        if node.type == "number":
            number = _numeric_value(ast.get_text(node))
            if (
                number is not None
                and number > MAX_IGNORED_NUMBER
                and number not in IGNORED_NUMBERS
            ):
                literals.setdefault(("number", number), []).append(
                    (node_line(node), format_number(number))
                )
        return None

    ast.walk(_visitor)
    return literals


def detect_magic_values(context: RuleContext) -> list[Suggestion]:
    """Suggest named constants for literals repeated three or more times."""
    suggestions: list[Suggestion] = []

    for occurrences in collect_literals(context.ast).values():
        if len(occurrences) < MIN_OCCURRENCES:
            continue
        first_line, display = occurrences[0]
        suggestions.append(
            Suggestion(
                rule=RULE_ID,
                category=Category.STATE_MANAGEMENT,
                message=f'Magic value "{display}" repeated {len(occurrences)} times',
                line=first_line,
                column=1,
                actionable=(
                    "Extract to a named constant or enum for better maintainability"
                ),
            )
        )

    return suggestions
