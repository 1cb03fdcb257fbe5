"""tree-sitter parsing for JSX/TSX component sources.

Quick start::

    from vibecheck.parsing import ASTEngine

    engine = ASTEngine()
    ast = engine.parse_file(source, "src/App.tsx")
"""

from .ast_engine import (
    FUNCTION_TYPES,
    MARKUP_ELEMENT_TYPES,
    ASTEngine,
    NodeVisitor,
    ParsedAST,
)

__all__ = [
    "ASTEngine",
    "FUNCTION_TYPES",
    "MARKUP_ELEMENT_TYPES",
    "NodeVisitor",
    "ParsedAST",
]
