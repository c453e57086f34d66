#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_config.py
"""Unit tests for configuration file discovery and loading."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from md2html.cli.config import (
    discover_config_file,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    merge_configs,
)
from md2html.exceptions import ConfigError


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigFile:
    """Tests for loading each supported format."""

    def test_load_toml_config(self, temp_dir: Path):
        """Test loading a TOML file with a nested markdown table."""
        path = temp_dir / ".md2html.toml"
        path.write_text('highlight_style = "monokai"\n\n[markdown]\nparse_tables = false\n', encoding="utf-8")

        config = load_config_file(path)

        assert config == {"highlight_style": "monokai", "markdown": {"parse_tables": False}}

    def test_load_yaml_config(self, temp_dir: Path):
        """Test loading a YAML file."""
        path = temp_dir / "settings.yaml"
        path.write_text("math: true\nhighlight_languages:\n  - go\n  - rust\n", encoding="utf-8")

        assert load_config_file(path) == {"math": True, "highlight_languages": ["go", "rust"]}

    def test_empty_yaml_is_empty_config(self, temp_dir: Path):
        """Test that an empty YAML document loads as an empty mapping."""
        path = temp_dir / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_load_json_config(self, temp_dir: Path):
        """Test loading a JSON file."""
        path = temp_dir / "settings.json"
        path.write_text(json.dumps({"language": "fr"}), encoding="utf-8")
        assert load_config_file(str(path)) == {"language": "fr"}

    def test_load_pyproject_with_tool_section(self, temp_dir: Path):
        """Test that only the tool.md2html table is read from pyproject.toml."""
        path = temp_dir / "pyproject.toml"
        path.write_text(
            '[project]\nname = "x"\n\n[tool.md2html]\nmermaid = false\n\n[tool.md2html.markdown]\nauto_heading_id = false\n',
            encoding="utf-8",
        )

        assert load_config_file(path) == {"mermaid": False, "markdown": {"auto_heading_id": False}}

    def test_load_pyproject_without_tool_section(self, temp_dir: Path):
        """Test that a pyproject.toml without the table gives an empty config."""
        path = temp_dir / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert load_config_file(path) == {}

    def test_missing_file(self, temp_dir: Path):
        """Test that a missing file raises ConfigError with its path."""
        with pytest.raises(ConfigError) as exc_info:
            load_config_file(temp_dir / "nope.toml")
        assert exc_info.value.config_path == str(temp_dir / "nope.toml")

    def test_directory_rejected(self, temp_dir: Path):
        """Test that a directory is not a config file."""
        with pytest.raises(ConfigError, match="not a file"):
            load_config_file(temp_dir)

    def test_unsupported_extension(self, temp_dir: Path):
        """Test that unknown extensions are rejected."""
        path = temp_dir / "settings.ini"
        path.write_text("[x]\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Unsupported config file format"):
            load_config_file(path)

    @pytest.mark.parametrize(
        "filename, content",
        [
            ("bad.toml", "this is = = not toml"),
            ("bad.json", "{not json"),
            ("bad.yaml", "key: [unclosed"),
        ],
    )
    def test_invalid_syntax(self, temp_dir: Path, filename: str, content: str):
        """Test that parse failures keep the original error."""
        path = temp_dir / filename
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config_file(path)

        assert exc_info.value.original_error is not None

    @pytest.mark.parametrize("filename, content", [("list.json", "[1, 2]"), ("list.yaml", "- a\n- b\n")])
    def test_non_mapping_rejected(self, temp_dir: Path, filename: str, content: str):
        """Test that a config file must hold a mapping."""
        path = temp_dir / filename
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError, match="must contain"):
            load_config_file(path)


@pytest.mark.unit
@pytest.mark.cli
class TestDiscovery:
    """Tests for config file discovery."""

    def test_find_config_in_cwd(self, temp_dir: Path):
        """Test finding a dedicated file in the start directory."""
        (temp_dir / ".md2html.yaml").write_text("math: true\n", encoding="utf-8")
        assert find_config_in_parents(temp_dir) == (temp_dir / ".md2html.yaml").resolve()

    def test_find_config_in_parent_directory(self, temp_dir: Path):
        """Test walking up to a parent directory."""
        (temp_dir / ".md2html.json").write_text("{}", encoding="utf-8")
        subdir = temp_dir / "a" / "b"
        subdir.mkdir(parents=True)

        assert find_config_in_parents(subdir) == (temp_dir / ".md2html.json").resolve()

    def test_dedicated_files_in_order(self, temp_dir: Path):
        """Test that TOML is preferred over JSON in the same directory."""
        (temp_dir / ".md2html.json").write_text("{}", encoding="utf-8")
        (temp_dir / ".md2html.toml").write_text("", encoding="utf-8")
        assert find_config_in_parents(temp_dir).name == ".md2html.toml"

    def test_dedicated_config_takes_precedence_over_pyproject(self, temp_dir: Path):
        """Test that a dedicated file wins over pyproject.toml in the same directory."""
        (temp_dir / "pyproject.toml").write_text("[tool.md2html]\nmath = true\n", encoding="utf-8")
        (temp_dir / ".md2html.yml").write_text("math: false\n", encoding="utf-8")
        assert find_config_in_parents(temp_dir).name == ".md2html.yml"

    def test_pyproject_without_section_is_skipped(self, temp_dir: Path):
        """Test that a pyproject.toml without the table does not stop the search."""
        (temp_dir / ".md2html.toml").write_text("math = true\n", encoding="utf-8")
        subdir = temp_dir / "project"
        subdir.mkdir()
        (subdir / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

        assert find_config_in_parents(subdir) == (temp_dir / ".md2html.toml").resolve()

    def test_invalid_pyproject_is_skipped(self, temp_dir: Path):
        """Test that an unparsable pyproject.toml is skipped during discovery."""
        (temp_dir / ".md2html.toml").write_text("math = true\n", encoding="utf-8")
        subdir = temp_dir / "project"
        subdir.mkdir()
        (subdir / "pyproject.toml").write_text("not = = toml", encoding="utf-8")

        assert find_config_in_parents(subdir) == (temp_dir / ".md2html.toml").resolve()

    def test_discover_config_in_cwd(self, temp_dir: Path):
        """Test discovery from the current directory."""
        (temp_dir / ".md2html.toml").write_text("", encoding="utf-8")
        with patch("pathlib.Path.cwd", return_value=temp_dir):
            assert discover_config_file() == (temp_dir / ".md2html.toml").resolve()

    def test_discover_config_in_home(self, temp_dir: Path):
        """Test the home directory fallback."""
        cwd_path = temp_dir / "work"
        home_path = temp_dir / "home"
        cwd_path.mkdir()
        home_path.mkdir()
        (home_path / ".md2html.json").write_text("{}", encoding="utf-8")

        with patch("pathlib.Path.cwd", return_value=cwd_path):
            with patch("pathlib.Path.home", return_value=home_path):
                assert discover_config_file() == home_path / ".md2html.json"

    def test_discover_config_returns_none_when_not_found(self, temp_dir: Path):
        """Test that discovery returns None when nothing exists."""
        cwd_path = temp_dir / "work"
        home_path = temp_dir / "home"
        cwd_path.mkdir()
        home_path.mkdir()

        with patch("pathlib.Path.cwd", return_value=cwd_path):
            with patch("pathlib.Path.home", return_value=home_path):
                assert discover_config_file() is None


@pytest.mark.unit
@pytest.mark.cli
class TestPriority:
    """Tests for merging and source priority."""

    def test_merge_configs_recurses(self):
        """Test that nested tables merge key by key."""
        base = {"markdown": {"parse_tables": False}, "math": True}
        override = {"markdown": {"auto_heading_id": False}, "math": False}

        assert merge_configs(base, override) == {
            "markdown": {"parse_tables": False, "auto_heading_id": False},
            "math": False,
        }
        assert base == {"markdown": {"parse_tables": False}, "math": True}

    def test_explicit_path_beats_env_path(self, temp_dir: Path):
        """Test that --config wins over MD2HTML_CONFIG."""
        explicit = temp_dir / "a.json"
        env = temp_dir / "b.json"
        explicit.write_text('{"language": "a"}', encoding="utf-8")
        env.write_text('{"language": "b"}', encoding="utf-8")

        assert load_config_with_priority(str(explicit), str(env)) == {"language": "a"}
        assert load_config_with_priority(None, str(env)) == {"language": "b"}

    def test_named_missing_file_is_an_error(self, temp_dir: Path):
        """Test that a named but missing file is not silently ignored."""
        with pytest.raises(ConfigError):
            load_config_with_priority(None, str(temp_dir / "missing.toml"))

    def test_falls_back_to_discovery(self, temp_dir: Path):
        """Test that discovery is used when no path is named."""
        (temp_dir / ".md2html.toml").write_text('language = "de"\n', encoding="utf-8")
        home_path = temp_dir / "home"
        home_path.mkdir()

        with patch("pathlib.Path.cwd", return_value=temp_dir):
            with patch("pathlib.Path.home", return_value=home_path):
                assert load_config_with_priority() == {"language": "de"}
