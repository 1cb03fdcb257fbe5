"""Tests for configuration loading."""

import json

import pytest

from vibecheck.config import (
    DEFAULT_IGNORE,
    DEFAULT_SEVERITY,
    VibeCheckConfig,
    load_config,
    parse_config,
    should_ignore_file,
    write_default_config,
)
from vibecheck.exceptions import ConfigParseError
from vibecheck.models import Severity


class TestDefaults:
    def test_default_values(self):
        config = VibeCheckConfig()
        assert config.rules.prop_drilling_depth == 3
        assert config.rules.max_component_lines == 150
        assert config.rules.require_memo is True
        assert config.ignore == list(DEFAULT_IGNORE)
        assert config.severity == DEFAULT_SEVERITY

    def test_json_keys(self):
        """Serialization uses the hyphenated file keys."""
        data = VibeCheckConfig().to_json_dict()
        assert data["rules"] == {
            "prop-drilling-depth": 3,
            "max-component-lines": 150,
            "require-memo": True,
        }
        assert data["severity"]["large-component"] == "error"

    def test_severity_for_unknown_rule(self):
        config = VibeCheckConfig()
        assert config.severity_for("no-such-rule") == Severity.WARNING
        assert config.severity_for("no-such-rule", Severity.INFO) == Severity.INFO


class TestParseConfig:
    def test_partial_rules_merged(self):
        """Missing rule keys keep their defaults."""
        config = parse_config('{"rules": {"max-component-lines": 80}}')
        assert config.rules.max_component_lines == 80
        assert config.rules.prop_drilling_depth == 3

    def test_severity_merged(self):
        """Severity overrides are merged key by key."""
        config = parse_config('{"severity": {"unused-props": "error"}}')
        assert config.severity["unused-props"] == Severity.ERROR
        assert config.severity["large-component"] == Severity.ERROR
        assert config.severity["magic-values"] == Severity.WARNING

    def test_ignore_replaced(self):
        """A user ignore list replaces the default one."""
        config = parse_config('{"ignore": ["generated"]}')
        assert config.ignore == ["generated"]

    def test_invalid_json(self):
        with pytest.raises(ConfigParseError, match="Invalid JSON in cfg.json"):
            parse_config("{not json", "cfg.json")

    def test_not_an_object(self):
        with pytest.raises(ConfigParseError, match="must be a JSON object"):
            parse_config("[]")

    def test_invalid_threshold(self):
        """Thresholds must be positive."""
        with pytest.raises(ConfigParseError) as exc_info:
            parse_config('{"rules": {"prop-drilling-depth": 0}}', "cfg.json")
        assert exc_info.value.config_path == "cfg.json"

    def test_invalid_severity(self):
        with pytest.raises(ConfigParseError):
            parse_config('{"severity": {"unused-props": "fatal"}}')


class TestLoadConfig:
    def test_no_file(self, tmp_path):
        """Defaults are used when no config file exists."""
        assert load_config(search_dir=tmp_path) == VibeCheckConfig()

    def test_default_file_name(self, tmp_path):
        (tmp_path / ".vibecheck.json").write_text('{"rules": {"require-memo": false}}')
        config = load_config(search_dir=tmp_path)
        assert config.rules.require_memo is False

    def test_alternate_file_name(self, tmp_path):
        (tmp_path / "vibecheck.config.json").write_text('{"ignore": []}')
        assert load_config(search_dir=tmp_path).ignore == []

    def test_explicit_path_first(self, tmp_path):
        """An explicit path wins over the default names."""
        (tmp_path / ".vibecheck.json").write_text('{"ignore": ["default"]}')
        custom = tmp_path / "custom.json"
        custom.write_text('{"ignore": ["custom"]}')
        assert load_config(custom, search_dir=tmp_path).ignore == ["custom"]

    def test_missing_explicit_path_falls_back(self, tmp_path):
        (tmp_path / ".vibecheck.json").write_text('{"ignore": ["default"]}')
        config = load_config("missing.json", search_dir=tmp_path)
        assert config.ignore == ["default"]

    def test_unparsable_file_uses_defaults(self, tmp_path):
        """A broken config file is reported and ignored."""
        (tmp_path / ".vibecheck.json").write_text("{broken")
        assert load_config(search_dir=tmp_path) == VibeCheckConfig()


class TestIgnorePatterns:
    def test_wildcards_stripped(self):
        """Patterns match as substrings once the wildcards are removed."""
        assert should_ignore_file("app/node_modules/lib/index.tsx", list(DEFAULT_IGNORE))
        assert should_ignore_file("src/generated/Api.tsx", ["**/generated/**"])

    def test_regular_file_kept(self):
        assert not should_ignore_file("src/Button.tsx", list(DEFAULT_IGNORE))

    def test_no_patterns(self):
        assert not should_ignore_file("src/Button.test.tsx", [])


class TestWriteDefaultConfig:
    def test_writes_once(self, tmp_path):
        """The file is created once and never overwritten."""
        path = tmp_path / ".vibecheck.json"
        assert write_default_config(path) is True
        data = json.loads(path.read_text())
        assert data["rules"]["prop-drilling-depth"] == 3

        path.write_text("{}")
        assert write_default_config(path) is False
        assert path.read_text() == "{}"

    def test_round_trips_through_loader(self, tmp_path):
        write_default_config(tmp_path / ".vibecheck.json")
        assert load_config(search_dir=tmp_path) == VibeCheckConfig()
