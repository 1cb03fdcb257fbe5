"""Shared fixtures for the vibecheck test suite."""

import textwrap

import pytest

from vibecheck.config import VibeCheckConfig
from vibecheck.parsing import ASTEngine
from vibecheck.rules import RuleContext


@pytest.fixture
def engine():
    """Create a shared ASTEngine instance."""
    return ASTEngine()


@pytest.fixture
def make_context(engine):
    """Build a ``RuleContext`` from a source snippet.

    The snippet is dedented, so tests can write it indented; line numbers
    start at the first line of the snippet.
    """

    def _make(
        source: str,
        filename: str = "Component.tsx",
        config: VibeCheckConfig | None = None,
    ) -> RuleContext:
        code = textwrap.dedent(source)
        return RuleContext(
            config=config or VibeCheckConfig(),
            filename=filename,
            ast=engine.parse_file(code, filename),
        )

    return _make
