#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the present2pdf CLI.

This module handles automatic discovery of configuration files, loading
configs from TOML, YAML or JSON, and turning a configuration dictionary into
renderer and parser options.

A configuration may set option fields at the top level or group them in
``[pdf]`` (renderer) and ``[present]`` (parser) tables::

    theme = "dark"

    [pdf]
    code_theme = "github-dark"
    max_code_lines = 25

    [present]
    escape_code_comments = true
"""

import argparse
import json
import logging
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from present2pdf.options.pdf import PdfRendererOptions
from present2pdf.options.present import PresentParserOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".present2pdf.toml", ".present2pdf.yaml", ".present2pdf.yml", ".present2pdf.json"]
PYPROJECT_SECTION = "present2pdf"


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.present2pdf] section from a pyproject.toml file.

    Returns
    -------
    dict
        Configuration dictionary, or empty dict if the section is absent

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_SECTION, {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` (default: the working directory) to the
    filesystem root. In each directory the dedicated config files are checked
    first, then a pyproject.toml with a [tool.present2pdf] section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                # Invalid pyproject.toml, skip it and continue searching
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Searches the working directory and its parents first, then the user's
    home directory.

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents()
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def _read_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_yaml(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def _read_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


_READERS = {".toml": _read_toml, ".yaml": _read_yaml, ".yml": _read_yaml, ".json": _read_json}


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Read one configuration file.

    ``pyproject.toml`` contributes only its ``[tool.present2pdf]`` table;
    other files are read whole according to their suffix. An empty file
    yields an empty configuration.

    Parameters
    ----------
    config_path : Path or str
        File to read

    Returns
    -------
    dict
        Configuration mapping

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, has an unknown suffix, does not parse, or
        its root is not a mapping

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    reader = _READERS.get(config_path.suffix.lower())
    if reader is None:
        raise argparse.ArgumentTypeError(
            f"Unsupported config file format: {config_path.suffix or config_path.name}. Use .toml, .yaml or .json"
        )

    try:
        config = reader(config_path)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration in {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Cannot read configuration file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Configuration in {config_path} must be a mapping, got {type(config).__name__}"
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load the one configuration file that applies to this run.

    The ``--config`` path wins over ``PRESENT2PDF_CONFIG``, which wins over
    discovery. Files are never merged.

    Returns
    -------
    dict
        Configuration mapping, empty when no file applies

    Raises
    ------
    argparse.ArgumentTypeError
        If the chosen file cannot be loaded

    """
    path = explicit_path or env_var_path or discover_config_file()
    if not path:
        return {}
    logger.debug(f"Using configuration file {path}")
    return load_config_file(path)


def _field_names(options_class: type) -> set[str]:
    return {f.name for f in fields(options_class)}


def options_from_config(config: Dict[str, Any]) -> tuple[PdfRendererOptions, PresentParserOptions]:
    """Build renderer and parser options from a configuration mapping.

    Keys in the ``pdf`` and ``present`` tables take precedence over the same
    keys at the top level. Unknown keys are logged and ignored.

    Raises
    ------
    argparse.ArgumentTypeError
        If a value is rejected by option validation

    """
    renderer_names = _field_names(PdfRendererOptions)
    parser_names = _field_names(PresentParserOptions)
    renderer_kwargs: Dict[str, Any] = {}
    parser_kwargs: Dict[str, Any] = {}

    for key, value in config.items():
        if key in ("pdf", "present") and isinstance(value, dict):
            continue
        if key in renderer_names:
            renderer_kwargs[key] = value
        if key in parser_names:
            parser_kwargs[key] = value
        if key not in renderer_names and key not in parser_names:
            logger.warning(f"Ignoring unknown configuration key: {key}")

    for section, names, target in (
        ("pdf", renderer_names, renderer_kwargs),
        ("present", parser_names, parser_kwargs),
    ):
        for key, value in (config.get(section) or {}).items():
            if key in names:
                target[key] = value
            else:
                logger.warning(f"Ignoring unknown configuration key: {section}.{key}")

    try:
        return PdfRendererOptions(**renderer_kwargs), PresentParserOptions(**parser_kwargs)
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration value: {e}") from e
