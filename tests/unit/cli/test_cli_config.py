"""Unit tests for present2pdf CLI configuration management.

This module tests configuration file discovery, loading in each supported
format, priority handling, and conversion to option objects.
"""

import argparse
import json
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from present2pdf.cli.config import (
    discover_config_file,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    options_from_config,
)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Test configuration file discovery functionality."""

    def test_find_in_start_dir(self, temp_dir):
        config_file = temp_dir / ".present2pdf.toml"
        config_file.write_text('theme = "dark"\n')
        assert find_config_in_parents(temp_dir) == config_file.resolve()

    def test_find_in_parent(self, temp_dir):
        config_file = temp_dir / ".present2pdf.yaml"
        config_file.write_text("theme: dark\n")
        child = temp_dir / "a" / "b"
        child.mkdir(parents=True)
        assert find_config_in_parents(child) == config_file.resolve()

    def test_pyproject_with_section(self, temp_dir):
        pyproject = temp_dir / "pyproject.toml"
        pyproject.write_text('[tool.present2pdf]\ntheme = "dark"\n')
        assert find_config_in_parents(temp_dir) == pyproject.resolve()

    def test_pyproject_without_section_is_skipped(self, temp_dir):
        child = temp_dir / "child"
        child.mkdir()
        (child / "pyproject.toml").write_text("[tool.other]\nx = 1\n")
        config_file = temp_dir / ".present2pdf.json"
        config_file.write_text("{}")
        assert find_config_in_parents(child) == config_file.resolve()

    def test_dedicated_file_beats_pyproject(self, temp_dir):
        (temp_dir / "pyproject.toml").write_text('[tool.present2pdf]\ntheme = "dark"\n')
        config_file = temp_dir / ".present2pdf.toml"
        config_file.write_text('theme = "light"\n')
        assert find_config_in_parents(temp_dir) == config_file.resolve()

    def test_discover_falls_back_to_home(self, temp_dir):
        home = temp_dir / "home"
        work = temp_dir / "work"
        home.mkdir()
        work.mkdir()
        config_file = home / ".present2pdf.toml"
        config_file.write_text('quiet = true\n')
        with patch("present2pdf.cli.config.find_config_in_parents", return_value=None):
            with patch("present2pdf.cli.config.Path.home", return_value=home):
                assert discover_config_file() == config_file


@pytest.mark.unit
@pytest.mark.cli
class TestConfigLoading:
    """Test loading each configuration format."""

    def test_toml(self, temp_dir):
        path = temp_dir / "c.toml"
        path.write_text('theme = "dark"\n\n[pdf]\nmax_code_lines = 30\n')
        assert load_config_file(path) == {"theme": "dark", "pdf": {"max_code_lines": 30}}

    def test_yaml(self, temp_dir):
        path = temp_dir / "c.yml"
        path.write_text(yaml.safe_dump({"code_theme": "github-dark"}))
        assert load_config_file(path) == {"code_theme": "github-dark"}

    def test_json(self, temp_dir):
        path = temp_dir / "c.json"
        path.write_text(json.dumps({"present": {"escape_code_comments": False}}))
        assert load_config_file(str(path)) == {"present": {"escape_code_comments": False}}

    def test_empty_yaml(self, temp_dir):
        path = temp_dir / "c.yaml"
        path.write_text("")
        assert load_config_file(path) == {}

    def test_pyproject_section(self, temp_dir):
        path = temp_dir / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.present2pdf]\nquiet = true\n')
        assert load_config_file(path) == {"quiet": True}

    def test_missing_file(self, temp_dir):
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(temp_dir / "nope.toml")

    def test_unsupported_extension(self, temp_dir):
        path = temp_dir / "c.ini"
        path.write_text("[x]")
        with pytest.raises(argparse.ArgumentTypeError, match="Unsupported"):
            load_config_file(path)

    def test_invalid_toml(self, temp_dir):
        path = temp_dir / "c.toml"
        path.write_text("theme = ")
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid configuration"):
            load_config_file(path)

    def test_non_mapping_root(self, temp_dir):
        path = temp_dir / "c.json"
        path.write_text("[1, 2]")
        with pytest.raises(argparse.ArgumentTypeError, match="mapping"):
            load_config_file(path)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigPriority:
    def test_explicit_path_wins(self, temp_dir):
        explicit = temp_dir / "explicit.toml"
        explicit.write_text('theme = "dark"\n')
        env = temp_dir / "env.toml"
        env.write_text('theme = "light"\n')
        assert load_config_with_priority(str(explicit), str(env)) == {"theme": "dark"}

    def test_env_path_used(self, temp_dir):
        env = temp_dir / "env.toml"
        env.write_text('quiet = true\n')
        assert load_config_with_priority(None, str(env)) == {"quiet": True}

    def test_nothing_found(self):
        with patch("present2pdf.cli.config.discover_config_file", return_value=None):
            assert load_config_with_priority() == {}


@pytest.mark.unit
@pytest.mark.cli
class TestOptionsFromConfig:
    """Test building option objects from configuration."""

    def test_empty(self):
        renderer, parser = options_from_config({})
        assert renderer.theme == "light"
        assert parser.escape_code_comments is True

    def test_top_level_and_sections(self):
        renderer, parser = options_from_config(
            {
                "theme": "dark",
                "max_code_lines": 10,
                "pdf": {"max_code_lines": 30, "code_theme": "vim"},
                "present": {"escape_code_comments": False, "base_dir": "slides"},
            }
        )
        assert renderer.theme == "dark"
        assert renderer.max_code_lines == 30
        assert renderer.code_theme == "vim"
        assert parser.escape_code_comments is False
        assert parser.base_dir == "slides"

    def test_unknown_keys_warn(self, caplog):
        with caplog.at_level("WARNING", logger="present2pdf.cli.config"):
            options_from_config({"colour": "red"})
        assert "colour" in caplog.text

    def test_invalid_value(self):
        with pytest.raises(argparse.ArgumentTypeError):
            options_from_config({"theme": "sepia"})

    def test_paths_are_plain_strings(self, temp_dir):
        renderer, _ = options_from_config({"text_font_path": str(temp_dir / "font.ttf")})
        assert Path(renderer.text_font_path).name == "font.ttf"

    def test_unknown_section_keys_warn(self, caplog):
        with caplog.at_level("WARNING", logger="present2pdf.cli.config"):
            renderer, _ = options_from_config({"pdf": {"theme": "dark", "pagesize": "A4"}})
        assert renderer.theme == "dark"
        assert "pdf.pagesize" in caplog.text
