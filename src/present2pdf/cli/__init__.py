#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for present2pdf.

Converts one present-format slide deck to a PDF presentation.

Examples
--------
Basic conversion (writes ``talk.pdf``)::

    $ present2pdf talk.slide

Dark slides with a matching code style::

    $ present2pdf talk.slide --theme dark --code-theme github-dark -o out.pdf

Use a configuration file from the environment::

    $ export PRESENT2PDF_CONFIG=~/slides.toml
    $ present2pdf talk.slide

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from present2pdf.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
)
from present2pdf.cli.config import load_config_with_priority, options_from_config
from present2pdf.constants import CONFIG_ENV_VAR
from present2pdf.exceptions import Present2PdfError
from present2pdf.logging_utils import configure_logging
from present2pdf.options.pdf import PdfRendererOptions
from present2pdf.options.present import PresentParserOptions

logger = logging.getLogger(__name__)

_RENDERER_FLAGS = (
    "theme",
    "code_theme",
    "quiet",
    "max_code_lines",
    "text_font",
    "code_font",
    "text_font_path",
    "code_font_path",
    "fail_on_resource_errors",
)
_PARSER_FLAGS = ("escape_code_comments", "base_dir")


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _flag_overrides(parsed_args: argparse.Namespace, names: tuple[str, ...]) -> dict[str, Any]:
    return {name: getattr(parsed_args, name) for name in names if getattr(parsed_args, name) is not None}


def build_options(parsed_args: argparse.Namespace) -> tuple[PdfRendererOptions, PresentParserOptions]:
    """Combine configuration file values with command-line flags.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration cannot be loaded or holds invalid values

    """
    config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
    renderer_options, parser_options = options_from_config(config)

    try:
        renderer_options = renderer_options.create_updated(**_flag_overrides(parsed_args, _RENDERER_FLAGS))
        parser_options = parser_options.create_updated(**_flag_overrides(parsed_args, _PARSER_FLAGS))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return renderer_options, parser_options


def _list_themes() -> int:
    from present2pdf.themes import get_available_themes

    for name in get_available_themes():
        print(name)
    return EXIT_SUCCESS


def _list_code_themes() -> int:
    from present2pdf.themes import get_available_code_styles

    for name in get_available_code_styles():
        print(name)
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return a process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.list_themes:
        return _list_themes()
    if parsed_args.list_code_themes:
        return _list_code_themes()

    if not parsed_args.input:
        print("Error: Input file is required", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)

    try:
        renderer_options, parser_options = build_options(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    # Lazy import keeps --help and --version free of the rendering stack
    from present2pdf.api import convert

    input_path = Path(parsed_args.input)
    try:
        output_path = convert(
            input_path,
            parsed_args.out,
            renderer_options=renderer_options,
            parser_options=parser_options,
        )
    except (Present2PdfError, ImportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(f"Created {output_path}")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
