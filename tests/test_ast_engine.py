"""Tests for the tree-sitter parsing engine."""

import pytest

from vibecheck.exceptions import SourceParseError
from vibecheck.parsing import ASTEngine, NodeVisitor, ParsedAST


def _parse(engine: ASTEngine, code: str, language: str = "tsx") -> ParsedAST:
    """Parse helper to reduce boilerplate."""
    return engine.parse(code, language=language)


class TestParse:
    def test_parse_tsx_component(self, engine):
        """A JSX component parses without errors in TSX mode."""
        ast = _parse(engine, "const App = () => <div className='x'>hi</div>;")
        assert isinstance(ast, ParsedAST)
        assert ast.language == "tsx"
        assert not ast.has_errors
        assert ast.root_node.type == "program"

    def test_unsupported_language(self, engine):
        """Unknown language names are rejected."""
        with pytest.raises(ValueError, match="Unsupported language"):
            engine.parse("x", language="python")

    def test_get_text(self, engine):
        """get_text returns the exact source span of a node."""
        ast = _parse(engine, "const greeting = 'héllo';")
        string = ast.find_nodes_by_type("string")[0]
        assert ast.get_text(string) == "'héllo'"

    def test_languages_are_cached(self, engine):
        """Parsers are created once per language."""
        engine.parse("a", language="javascript")
        engine.parse("b", language="javascript")
        assert list(engine._parsers) == ["javascript"]


class TestParseFile:
    def test_tsx_extension(self, engine):
        """.tsx files are parsed in TSX mode first."""
        ast = engine.parse_file("const A = () => <div />;", "src/A.tsx")
        assert ast.language == "tsx"

    def test_js_extension_with_markup(self, engine):
        """.js files with markup parse in JavaScript mode."""
        ast = engine.parse_file("const A = () => <div />;", "src/A.js")
        assert ast.language == "javascript"

    def test_ts_extension(self, engine):
        """.ts files are parsed in TypeScript mode first."""
        ast = engine.parse_file("const count: number = 1;", "src/count.ts")
        assert ast.language == "typescript"

    def test_unknown_extension_defaults_to_tsx(self, engine):
        """Files without a known extension are tried as TSX."""
        ast = engine.parse_file("const A = () => <div />;", "snippet")
        assert ast.language == "tsx"

    def test_unparsable_source_raises(self, engine):
        """Source with syntax errors in every mode raises SourceParseError."""
        with pytest.raises(SourceParseError, match="Failed to parse broken.tsx"):
            engine.parse_file("const x = {;", "broken.tsx")


class TestTraversal:
    def test_find_nodes_by_type_document_order(self, engine):
        """Matches come back in source order."""
        ast = _parse(engine, "const a = 1; const b = 2; const c = 3;")
        names = [
            ast.get_text(n.child_by_field_name("name"))
            for n in ast.find_nodes_by_type("variable_declarator")
        ]
        assert names == ["a", "b", "c"]

    def test_find_nodes_by_type_set(self, engine):
        """A set of node types matches any of them."""
        ast = _parse(engine, "const A = () => <div><br /></div>;")
        nodes = ast.find_nodes_by_type(
            frozenset({"jsx_element", "jsx_self_closing_element"})
        )
        assert [n.type for n in nodes] == ["jsx_element", "jsx_self_closing_element"]

    def test_find_nodes_restricted_to_subtree(self, engine):
        """The root argument limits the search."""
        ast = _parse(engine, "function f() { return g(); }\nh();")
        function = ast.find_nodes_by_type("function_declaration")[0]
        calls = ast.find_nodes_by_type("call_expression", root=function)
        assert [ast.get_text(c) for c in calls] == ["g()"]

    def test_walk_can_skip_subtrees(self, engine):
        """Returning False from the visitor skips the node's children."""
        ast = _parse(engine, "function f() { a(); }\nb();")
        seen = []

        def visitor(node, _depth):
            if node.type == "function_declaration":
                return False
            if node.type == "call_expression":
                seen.append(ast.get_text(node))
            return None

        ast.walk(visitor)
        assert seen == ["b()"]

    def test_walk_reports_depth(self, engine):
        """The root is visited at depth zero and children one deeper."""
        ast = _parse(engine, "a;")
        depths = {}

        def visitor(node, depth):
            depths.setdefault(node.type, depth)

        ast.walk(visitor)
        assert depths["program"] == 0
        assert depths["expression_statement"] == 1

    def test_visitor_enter_exit_balanced(self, engine):
        """Every entered element is exited, in nesting order."""
        ast = _parse(engine, "const A = () => <div><span>x</span></div>;")

        class Recorder(NodeVisitor):
            def __init__(self):
                self.events = []

            def enter_jsx_element(self, node):
                self.events.append(("enter", ast.get_text(node)[:5]))

            def exit_jsx_element(self, node):
                self.events.append(("exit", ast.get_text(node)[:5]))

        recorder = Recorder()
        ast.traverse(recorder)
        assert recorder.events == [
            ("enter", "<div>"),
            ("enter", "<span"),
            ("exit", "<span"),
            ("exit", "<div>"),
        ]

    def test_find_enclosing_function(self, engine):
        """The nearest function ancestor is returned."""
        ast = _parse(engine, "function Outer() { const f = () => call(); }")
        call = ast.find_nodes_by_type("call_expression")[0]
        function = ast.find_enclosing_function(call)
        assert function is not None
        assert function.type == "arrow_function"

    def test_find_enclosing_function_top_level(self, engine):
        """Top-level nodes have no enclosing function."""
        ast = _parse(engine, "call();")
        call = ast.find_nodes_by_type("call_expression")[0]
        assert ast.find_enclosing_function(call) is None
