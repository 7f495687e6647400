"""Tests for prompt configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from vcprompt.config import ConfigError, PromptConfig


class TestPromptConfig:
    """Tests for PromptConfig defaults and sources."""

    def test_defaults(self) -> None:
        """Defaults give a compact colored prompt."""
        config = PromptConfig()

        assert config.color is True
        assert config.prefix == " "
        assert config.name == "{symbol}"
        assert config.ahead == "↑{value}"
        assert config.behind == "↓{value}"
        assert config.branch_color == "magenta"
        assert config.clean == "✔"
        assert config.suffix == ""

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """VCP_* variables override defaults."""
        monkeypatch.setenv("VCP_AHEAD", "+{value}")
        monkeypatch.setenv("VCP_BRANCH_COLOR", "cyan")
        monkeypatch.setenv("VCP_COLOR", "false")

        config = PromptConfig.load()

        assert config.ahead == "+{value}"
        assert config.branch_color == "cyan"
        assert config.color is False

    def test_yaml_file(self, tmp_path: Path) -> None:
        """Settings can be read from a YAML file."""
        config_file = tmp_path / "vcprompt.yaml"
        config_file.write_text("prefix: '['\nsuffix: ']'\nstaged_color: green\n", encoding="utf-8")

        config = PromptConfig.load(config_file)

        assert config.prefix == "["
        assert config.suffix == "]"
        assert config.staged_color == "green"

    def test_yaml_file_beats_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """An explicit file wins over the environment."""
        monkeypatch.setenv("VCP_SEPARATOR", "/")
        monkeypatch.setenv("VCP_PREFIX", "<")
        config_file = tmp_path / "vcprompt.yaml"
        config_file.write_text("separator: ' '\n", encoding="utf-8")

        config = PromptConfig.load(config_file)

        assert config.separator == " "
        assert config.prefix == "<"

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """A missing file is not an error."""
        assert PromptConfig.load(tmp_path / "nope.yaml") == PromptConfig()

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """An empty YAML document means no overrides."""
        config_file = tmp_path / "vcprompt.yaml"
        config_file.write_text("", encoding="utf-8")

        assert PromptConfig.load(config_file) == PromptConfig()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Unparsable YAML is a configuration error."""
        config_file = tmp_path / "vcprompt.yaml"
        config_file.write_text("prefix: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            PromptConfig.load(config_file)

    def test_yaml_must_be_mapping(self, tmp_path: Path) -> None:
        """A YAML list is rejected."""
        config_file = tmp_path / "vcprompt.yaml"
        config_file.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            PromptConfig.load(config_file)

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Typos in the file are reported."""
        config_file = tmp_path / "vcprompt.yaml"
        config_file.write_text("brnach: main\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            PromptConfig.load(config_file)

    def test_invalid_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Colors must be understood by rich."""
        monkeypatch.setenv("VCP_STAGED_COLOR", "not a color")

        with pytest.raises(ConfigError):
            PromptConfig.load()

    def test_empty_color_allowed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty color disables coloring of that segment."""
        monkeypatch.setenv("VCP_BRANCH_COLOR", "")

        assert PromptConfig.load().branch_color == ""

    def test_invalid_template(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Only {value} and {symbol} placeholders are allowed."""
        monkeypatch.setenv("VCP_AHEAD", "{count}")

        with pytest.raises(ConfigError):
            PromptConfig.load()

    def test_symbol_only_in_name_template(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """{symbol} is only filled in for the name segment."""
        monkeypatch.setenv("VCP_BRANCH", "{symbol}{value}")

        with pytest.raises(ConfigError):
            PromptConfig.load()

    def test_symbol_in_name_template(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The name segment accepts both placeholders."""
        monkeypatch.setenv("VCP_NAME", "{value}{symbol}")

        assert PromptConfig.load().name == "{value}{symbol}"

    @pytest.mark.parametrize(
        ("variable", "template"),
        [
            ("VCP_BRANCH", "{value.upper}"),
            ("VCP_AHEAD", "{value.real}"),
            ("VCP_OPERATION", "{value[0]}"),
        ],
    )
    def test_attribute_and_index_access_rejected(
        self, monkeypatch: pytest.MonkeyPatch, variable: str, template: str
    ) -> None:
        """Placeholders must be bare names."""
        monkeypatch.setenv(variable, template)

        with pytest.raises(ConfigError):
            PromptConfig.load()

    def test_format_spec_checked_against_value_type(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Format specs must fit the segment value: counts are integers, the branch is text."""
        monkeypatch.setenv("VCP_STAGED", "{value:03d}")
        assert PromptConfig.load().staged == "{value:03d}"

        monkeypatch.setenv("VCP_BRANCH", "{value:d}")
        with pytest.raises(ConfigError):
            PromptConfig.load()

    def test_loaded_templates_render(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A template that passes validation formats without errors."""
        from vcprompt.core.models import Status
        from vcprompt.formatter import format_status

        monkeypatch.setenv("VCP_NAME", "{value}:{symbol}")
        monkeypatch.setenv("VCP_AHEAD", "+{value:>2}")
        monkeypatch.setenv("VCP_COLOR", "false")
        config = PromptConfig.load()

        status = Status(name="git", symbol="±", branch="main", ahead=3)
        assert format_status(status, config) == " git:±main+ 3|✔"
