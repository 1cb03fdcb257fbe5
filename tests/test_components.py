"""Tests for the component locator."""

import textwrap

import pytest

from vibecheck.rules import find_components, is_component_name
from vibecheck.rules.components import (
    GENERIC_PROPS,
    find_component_bindings,
    find_memoized_names,
)


@pytest.fixture
def locate(engine):
    """Parse a dedented snippet as TSX and return its components."""

    def _locate(source, filename="Component.tsx"):
        ast = engine.parse_file(textwrap.dedent(source), filename)
        return find_components(ast)

    return _locate


class TestComponentNames:
    @pytest.mark.parametrize("name", ["App", "UserCard", "X"])
    def test_uppercase_names(self, name):
        """Names starting with an uppercase letter are component-like."""
        assert is_component_name(name)

    @pytest.mark.parametrize("name", ["app", "useThing", "_Private", ""])
    def test_other_names(self, name):
        """Anything else is not."""
        assert not is_component_name(name)


class TestFindComponents:
    def test_function_declaration(self, locate):
        """Named function declarations are components."""
        components = locate("""\
            function Card({ title, body }) {
              return <div>{title}</div>;
            }
        """)
        assert len(components) == 1
        card = components[0]
        assert card.name == "Card"
        assert card.props == ("title", "body")
        assert card.line_start == 1
        assert card.line_end == 3
        assert card.line_count == 3

    def test_arrow_function_binding(self, locate):
        """Arrow functions bound to uppercase variables are components."""
        components = locate("const Badge = ({ label }) => <span>{label}</span>;")
        assert [c.name for c in components] == ["Badge"]
        assert components[0].props == ("label",)

    def test_lowercase_functions_ignored(self, locate):
        """Helpers and hooks are not components."""
        components = locate("""\
            function formatDate(d) { return d; }
            const useThing = () => 1;
            const App = () => <div />;
        """)
        assert [c.name for c in components] == ["App"]

    def test_function_expression_binding_ignored(self, locate):
        """Only arrow functions count as variable-bound components."""
        assert locate("const App = function () { return <div />; };") == []

    def test_document_order(self, locate):
        """Components are returned in source order."""
        components = locate("""\
            const B = () => <b />;
            function A() { return <a />; }
            const C = () => <i />;
        """)
        assert [c.name for c in components] == ["B", "A", "C"]

    def test_bindings_helper(self, engine):
        """find_component_bindings pairs names with function nodes."""
        ast = engine.parse("const A = () => null;\nfunction B() {}")
        bindings = find_component_bindings(ast)
        assert [(name, node.type) for name, node in bindings] == [
            ("A", "arrow_function"),
            ("B", "function_declaration"),
        ]


class TestProps:
    def test_generic_props_parameter(self, locate):
        """A plain identifier parameter is recorded as the generic props name."""
        (component,) = locate("const App = (props) => <div>{props.title}</div>;")
        assert component.props == (GENERIC_PROPS,)
        assert component.has_props

    def test_bare_arrow_parameter(self, locate):
        """``x => ...`` also yields the generic props name."""
        (component,) = locate("const App = p => <div>{p.title}</div>;")
        assert component.props == (GENERIC_PROPS,)

    def test_no_parameters(self, locate):
        """Components without parameters have no props."""
        (component,) = locate("const App = () => <div />;")
        assert component.props == ()
        assert not component.has_props

    def test_typed_destructuring(self, locate):
        """Type annotations around a destructured parameter are unwrapped."""
        (component,) = locate(
            "const Card = ({ title, subtitle }: CardProps) => <h1>{title}</h1>;"
        )
        assert component.props == ("title", "subtitle")

    def test_defaults_and_renames(self, locate):
        """Defaults, renames and rest elements are handled."""
        (component,) = locate("""\
            function Card({ title: heading, size = 2, ...rest } = {}) {
              return <h1 {...rest}>{heading}{size}</h1>;
            }
        """, filename="Card.jsx")
        assert component.props == ("title", "size")
        assert component.prop_locals == ("heading", "size")
        assert component.local_name("title") == "heading"

    def test_nested_rename_has_no_local_name(self, locate):
        """A renamed prop that destructures further has no single local name."""
        (component,) = locate(
            "const Card = ({ user: { name } }) => <h1>{name}</h1>;"
        )
        assert component.props == ("user",)
        assert component.local_name("user") is None

    def test_rest_only_parameter_has_props(self, locate):
        """``({ ...rest })`` declares no prop names but still takes props."""
        (component,) = locate("const Panel = ({ ...rest }) => <div {...rest} />;")
        assert component.props == ()
        assert component.has_parameter
        assert component.has_props


class TestBodyFacts:
    def test_used_identifiers(self, locate):
        """Identifiers referenced in the body are collected."""
        (component,) = locate("""\
            function Card({ title, body }) {
              const upper = title.toUpperCase();
              return <div>{upper}</div>;
            }
        """)
        assert {"title", "upper", "toUpperCase"} <= component.used_identifiers
        assert "body" not in component.used_identifiers

    def test_markup_names_are_not_references(self, locate):
        """Tag names and attribute names do not count as usage."""
        (component,) = locate("""\
            function Card({ title }) {
              return <section className={title}><Header.Title /></section>;
            }
        """)
        assert "title" in component.used_identifiers
        for name in ("section", "className", "Header", "Title"):
            assert name not in component.used_identifiers

    def test_hook_count(self, locate):
        """Plain calls starting with ``use`` count as hooks."""
        (component,) = locate("""\
            function Form() {
              const [a, setA] = useState(0);
              useEffect(() => {}, []);
              const value = React.useMemo(() => a, [a]);
              return <form />;
            }
        """)
        assert component.hook_count == 2

    def test_markup_count(self, locate):
        """Paired and self-closing elements are both counted."""
        (component,) = locate("const A = () => <ul><li /><li>x</li></ul>;")
        assert component.markup_count == 3


class TestMemoization:
    def test_react_memo(self, locate):
        """``React.memo(X)`` marks X as memoized."""
        components = locate("""\
            const Card = ({ title }) => <h1>{title}</h1>;
            const Other = () => <p />;
            export default React.memo(Card);
        """)
        memoized = {c.name: c.is_memoized for c in components}
        assert memoized == {"Card": True, "Other": False}

    def test_memo_with_comparator(self, engine):
        """A comparator second argument does not hide the component."""
        ast = engine.parse("export default memo(Card, (a, b) => a.id === b.id);")
        assert find_memoized_names(ast) == frozenset({"Card"})

    def test_other_memo_calls_ignored(self, engine):
        """Only bare ``memo`` and ``React.memo`` are recognised."""
        ast = engine.parse("cache.memo(Card); memo(() => null);")
        assert find_memoized_names(ast) == frozenset()
