"""Core AST parsing engine for JSX/TSX component sources.

Wraps tree-sitter so component sources can be parsed in the right grammar
mode and walked without recursion. The component locator and every rule
detector work on the ``ParsedAST`` produced here.

Usage::

    engine = ASTEngine()
    ast = engine.parse_file(source, "src/App.tsx")
    for node in ast.find_nodes_by_type("jsx_self_closing_element"):
        print(ast.get_text(node))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import PurePath

import tree_sitter as ts
import tree_sitter_javascript as ts_js
import tree_sitter_typescript as ts_ts

from ..exceptions import SourceParseError

logger = logging.getLogger(__name__)

# Node types that open a new function scope. ``function`` is the name older
# grammar releases use for function expressions.
FUNCTION_TYPES = frozenset({
    "function_declaration",
    "function_expression",
    "function",
    "arrow_function",
    "method_definition",
    "generator_function_declaration",
    "generator_function",
})

# Markup (JSX) element node types: paired and self-closing.
MARKUP_ELEMENT_TYPES = frozenset({"jsx_element", "jsx_self_closing_element"})


# ---------------------------------------------------------------------------
# Visitor interface
# ---------------------------------------------------------------------------


class NodeVisitor:
    """Enter/exit visitor dispatched on node type.

    Subclasses define ``enter_<node_type>`` and/or ``exit_<node_type>``
    methods, e.g. ``enter_jsx_element``. An enter handler may return
    ``False`` to skip the subtree; the matching exit handler still runs.
    """

    def enter(self, node: ts.Node, depth: int) -> bool | None:
        handler = getattr(self, f"enter_{node.type}", None)
        if handler is None:
            return None
        return handler(node)

    def exit(self, node: ts.Node, depth: int) -> None:
        handler = getattr(self, f"exit_{node.type}", None)
        if handler is not None:
            handler(node)


# ---------------------------------------------------------------------------
# ParsedAST wrapper
# ---------------------------------------------------------------------------


class ParsedAST:
    """A parse tree together with the text it was parsed from.

    Attributes:
        tree: The ``tree_sitter.Tree``.
        source_code: The parsed text.
        language: Grammar mode that produced the tree: ``"javascript"``,
            ``"typescript"`` or ``"tsx"``.
    """

    __slots__ = ("tree", "source_code", "language", "_source_bytes")

    def __init__(
        self,
        tree: ts.Tree,
        source_code: str,
        language: str,
    ) -> None:
        self.tree = tree
        self.source_code = source_code
        self.language = language
        self._source_bytes: bytes = source_code.encode("utf-8")

    @property
    def root_node(self) -> ts.Node:
        """The ``program`` node."""
        return self.tree.root_node

    @property
    def has_errors(self) -> bool:
        """Whether any ERROR or MISSING node exists in the tree."""
        return self.tree.root_node.has_error

    def get_text(self, node: ts.Node) -> str:
        """Source text covered by *node*, decoded from the byte offsets."""
        return self._source_bytes[node.start_byte:node.end_byte].decode(
            "utf-8", errors="replace"
        )

    def walk(
        self,
        visitor: Callable[[ts.Node, int], bool | None],
        root: ts.Node | None = None,
    ) -> None:
        """Pre-order walk calling ``visitor(node, depth)`` for every node.

        A visitor that returns ``False`` (not just a falsy value) prunes the
        subtree below that node.

        Args:
            visitor: Callable receiving ``(node, depth)``.
            root: Restrict the walk to the subtree rooted at this node.
                Defaults to the whole tree.
        """
        self._traverse(self.root_node if root is None else root, visitor, None)

    def traverse(self, visitor: NodeVisitor, root: ts.Node | None = None) -> None:
        """Walk the AST calling ``visitor.enter`` and ``visitor.exit``.

        Args:
            visitor: A ``NodeVisitor`` instance.
            root: Restrict the traversal to this subtree.
        """
        start = self.root_node if root is None else root
        self._traverse(start, visitor.enter, visitor.exit)

    def find_nodes_by_type(
        self, node_type: str | frozenset[str], root: ts.Node | None = None
    ) -> list[ts.Node]:
        """Return all nodes matching *node_type*, in document order.

        Args:
            node_type: A tree-sitter node type string, or a set of them.
            root: Restrict the search to this subtree.
        """
        types = {node_type} if isinstance(node_type, str) else node_type
        matches: list[ts.Node] = []

        def _visitor(node: ts.Node, _depth: int) -> None:
            if node.type in types:
                matches.append(node)

        self.walk(_visitor, root)
        return matches

    @staticmethod
    def find_enclosing_function(node: ts.Node) -> ts.Node | None:
        """Walk up the AST to find the nearest enclosing function node."""
        current = node.parent
        while current is not None:
            if current.type in FUNCTION_TYPES:
                return current
            current = current.parent
        return None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _traverse(
        root: ts.Node,
        enter: Callable[[ts.Node, int], bool | None],
        exit: Callable[[ts.Node, int], None] | None,
    ) -> None:
        # Iterative tree-cursor walk; depth is tracked explicitly.
        cursor = root.walk()
        depth = 0
        while True:
            node = cursor.node
            if enter(node, depth) is not False and cursor.goto_first_child():
                depth += 1
                continue
            if exit is not None:
                exit(node, depth)
            while True:
                if depth == 0:
                    return
                if cursor.goto_next_sibling():
                    break
                cursor.goto_parent()
                depth -= 1
                if exit is not None:
                    exit(cursor.node, depth)


# ---------------------------------------------------------------------------
# Supported languages
# ---------------------------------------------------------------------------

_SUPPORTED_LANGUAGES = frozenset({"javascript", "typescript", "tsx"})

# Grammar modes tried in order for each file extension.
_GRAMMAR_MODES: dict[str, tuple[str, ...]] = {
    ".tsx": ("tsx", "typescript"),
    ".ts": ("typescript", "tsx"),
    ".jsx": ("javascript", "tsx"),
    ".js": ("javascript", "tsx"),
}


# ---------------------------------------------------------------------------
# ASTEngine
# ---------------------------------------------------------------------------


class ASTEngine:
    """Parses component sources with the JavaScript and TypeScript grammars.

    Grammars and parsers are built on first use and reused afterwards, so
    one engine should be shared across a run.

    Example::

        engine = ASTEngine()
        ast = engine.parse(source, language="tsx")
    """

    def __init__(self) -> None:
        self._languages: dict[str, ts.Language] = {}
        self._parsers: dict[str, ts.Parser] = {}

    # ------------------------------------------------------------------
    # Grammars and parsers
    # ------------------------------------------------------------------

    def _get_language(self, language: str) -> ts.Language:
        """Cached tree-sitter grammar for *language*.

        Args:
            language: One of ``"javascript"``, ``"typescript"``, ``"tsx"``.

        Raises:
            ValueError: If *language* is not supported.
        """
        if language not in _SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported language: {language!r}. "
                f"Supported: {', '.join(sorted(_SUPPORTED_LANGUAGES))}"
            )

        if language not in self._languages:
            if language == "javascript":
                self._languages[language] = ts.Language(ts_js.language())
            elif language == "typescript":
                self._languages[language] = ts.Language(
                    ts_ts.language_typescript()
                )
            else:  # tsx
                self._languages[language] = ts.Language(
                    ts_ts.language_tsx()
                )

        return self._languages[language]

    def _get_parser(self, language: str) -> ts.Parser:
        """Cached ``Parser`` bound to the grammar for *language*."""
        if language not in self._parsers:
            lang = self._get_language(language)
            self._parsers[language] = ts.Parser(language=lang)
        return self._parsers[language]

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, source_code: str, language: str = "tsx") -> ParsedAST:
        """Parse *source_code* into a ``ParsedAST``.

        Args:
            source_code: The full file contents to parse.
            language: One of ``"javascript"``, ``"typescript"``, or
                ``"tsx"``.

        Returns:
            A ``ParsedAST`` wrapping the parse tree. The tree may contain
            error nodes; check ``has_errors``.

        Raises:
            ValueError: If *language* is not supported.
        """
        parser = self._get_parser(language)
        tree = parser.parse(source_code.encode("utf-8"))
        return ParsedAST(tree=tree, source_code=source_code, language=language)

    def parse_file(self, source_code: str, filename: str) -> ParsedAST:
        """Parse a source file, trying each grammar mode for its extension.

        The first mode that yields an error-free tree wins.

        Args:
            source_code: The file contents.
            filename: Path used to pick the grammar modes.

        Raises:
            SourceParseError: If every grammar mode produced parse errors.
        """
        suffix = PurePath(filename).suffix.lower()
        modes = _GRAMMAR_MODES.get(suffix, ("tsx", "javascript"))

        for language in modes:
            ast = self.parse(source_code, language=language)
            if not ast.has_errors:
                return ast
            logger.debug("Parsing %s as %s produced errors", filename, language)

        raise SourceParseError(
            f"Failed to parse {filename} (tried {', '.join(modes)})"
        )

