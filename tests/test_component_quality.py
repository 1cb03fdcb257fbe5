"""Tests for the component-quality rule group."""

from vibecheck.config import RulesConfig, VibeCheckConfig
from vibecheck.models import Category, Severity
from vibecheck.rules.component_quality import (
    analyze_component_quality,
    check_complexity,
    check_component_size,
    check_unused_props,
    complexity_score,
)
from vibecheck.rules.components import find_components


def _component(name: str, line_count: int) -> str:
    """Source of a component spanning exactly *line_count* lines."""
    body = "".join("  const x = null;\n" for _ in range(line_count - 3))
    return f"function {name}() {{\n{body}  return null;\n}}\n"


class TestComponentSize:
    def test_over_limit(self, make_context):
        """One line over max-component-lines is an error at the definition."""
        config = VibeCheckConfig(rules=RulesConfig(max_component_lines=5))
        context = make_context(_component("Big", 6), config=config)
        (component,) = find_components(context.ast)
        issues = check_component_size(component, context)
        assert len(issues) == 1
        assert issues[0].rule == "large-component"
        assert issues[0].severity == Severity.ERROR
        assert issues[0].message == "Large component detected (6 lines, max: 5)"
        assert issues[0].line == 1

    def test_at_limit(self, make_context):
        """Exactly max-component-lines is fine."""
        config = VibeCheckConfig(rules=RulesConfig(max_component_lines=5))
        context = make_context(_component("Big", 5), config=config)
        (component,) = find_components(context.ast)
        assert check_component_size(component, context) == []

    def test_configured_severity(self, make_context):
        """The large-component severity can be lowered."""
        config = VibeCheckConfig(
            rules=RulesConfig(max_component_lines=5),
            severity={"large-component": "warning"},
        )
        context = make_context(_component("Big", 6), config=config)
        (component,) = find_components(context.ast)
        assert check_component_size(component, context)[0].severity == Severity.WARNING


class TestUnusedProps:
    def test_unused_destructured_prop(self, make_context):
        """Each declared but unreferenced prop is a warning."""
        context = make_context("""\
            function Card({ title, body, footer }) {
              return <h1>{title}</h1>;
            }
        """)
        (component,) = find_components(context.ast)
        issues = check_unused_props(component, context)
        assert [i.message for i in issues] == [
            'Unused prop detected: "body"',
            'Unused prop detected: "footer"',
        ]
        assert all(i.severity == Severity.WARNING for i in issues)
        assert all(i.category == Category.COMPONENT_QUALITY for i in issues)

    def test_generic_props_never_unused(self, make_context):
        """A plain ``props`` parameter is not reported."""
        context = make_context("const Card = (props) => <h1 />;")
        (component,) = find_components(context.ast)
        assert check_unused_props(component, context) == []

    def test_props_used_in_nested_scope(self, make_context):
        """Usage anywhere in the body counts."""
        context = make_context("""\
            const List = ({ items, onSelect }) => (
              <ul>{items.map((item) => <li onClick={() => onSelect(item)} />)}</ul>
            );
        """)
        (component,) = find_components(context.ast)
        assert check_unused_props(component, context) == []

    def test_renamed_prop_used_through_alias(self, make_context):
        """A renamed prop is used when its local alias is referenced."""
        context = make_context("""\
            function Card({ title: heading, body: text }) {
              return <h1>{heading}</h1>;
            }
        """)
        (component,) = find_components(context.ast)
        issues = check_unused_props(component, context)
        assert [i.message for i in issues] == ['Unused prop detected: "body"']


class TestComplexity:
    def test_over_two_hundred_lines(self, make_context):
        """Components over 200 lines get a complexity suggestion."""
        context = make_context(_component("Huge", 201))
        (component,) = find_components(context.ast)
        suggestions = check_complexity(component)
        assert [s.rule for s in suggestions] == ["high-complexity"]

    def test_two_hundred_lines(self, make_context):
        context = make_context(_component("Huge", 200))
        (component,) = find_components(context.ast)
        assert check_complexity(component) == []

    def test_complexity_score(self, make_context):
        """Only components over 100 lines add to the score."""
        context = make_context(_component("A", 120) + _component("B", 100))
        assert complexity_score(find_components(context.ast)) == 6


class TestComponentQualityGroup:
    def test_metrics(self, make_context):
        """The group reports component count, average size and complexity."""
        context = make_context(_component("A", 4) + _component("B", 6))
        result = analyze_component_quality(context)
        assert result.metrics == {
            "component_count": 2,
            "average_component_size": 5.0,
            "complexity_score": 0,
        }

    def test_no_components(self, make_context):
        """Files without components have zeroed metrics."""
        result = analyze_component_quality(make_context("export const x = 1;"))
        assert result.metrics["component_count"] == 0
        assert result.metrics["average_component_size"] == 0.0
        assert result.issues == []

    def test_default_limit(self, make_context):
        """The default limit is 150 lines."""
        result = analyze_component_quality(make_context(_component("Big", 151)))
        assert [i.rule for i in result.issues] == ["large-component"]
