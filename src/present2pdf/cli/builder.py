#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction and exit codes for the present2pdf CLI.

Option flags default to ``None`` so that only the flags a user actually
passes override values from a configuration file.
"""

import argparse
import difflib
from dataclasses import fields

from present2pdf.exceptions import (
    DependencyError,
    FileError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from present2pdf.options.pdf import PdfRendererOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_version() -> str:
    """Get the installed version of the present2pdf package."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("present2pdf")
    except PackageNotFoundError:
        from present2pdf import __version__

        return __version__


def validate_pygments_theme(theme_name: str) -> str:
    """Validate that a Pygments theme name is valid.

    Parameters
    ----------
    theme_name : str
        Theme name to validate

    Returns
    -------
    str
        The validated theme name

    Raises
    ------
    argparse.ArgumentTypeError
        If theme name is not valid

    """
    from pygments.styles import get_all_styles

    available_themes = list(get_all_styles())
    if theme_name not in available_themes:
        suggestions = sorted(difflib.get_close_matches(theme_name, available_themes))
        hint = f" Did you mean: {', '.join(suggestions)}?" if suggestions else ""
        raise argparse.ArgumentTypeError(
            f"Invalid Pygments theme '{theme_name}'.{hint} Use --list-code-themes for the full list."
        )
    return theme_name


def positive_int(value: str) -> int:
    """Argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected an integer, got '{value}'") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {number}")
    return number


def _option_help(name: str) -> str:
    for f in fields(PdfRendererOptions):
        if f.name == name:
            return f.metadata.get("help", "")
    return ""


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="present2pdf",
        description="Convert a present-format slide deck (.slide) to a PDF presentation.",
        epilog="""
Examples:
  present2pdf talk.slide
  present2pdf talk.slide -o talk.pdf --theme dark --code-theme github-dark
  present2pdf talk.slide --quiet --max-code-lines 30

Configuration is read from --config, the PRESENT2PDF_CONFIG environment
variable, or a discovered .present2pdf.toml/.yaml/.json or [tool.present2pdf]
section in pyproject.toml. Command-line flags override configuration values.
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("input", nargs="?", help="Presentation source file (.slide)")
    parser.add_argument("--out", "-o", dest="out", metavar="OUTPUT", help="Output PDF path (default: INPUT with .pdf)")
    parser.add_argument("--version", "-V", action="version", version=f"present2pdf {get_version()}")

    rendering = parser.add_argument_group("rendering options")
    rendering.add_argument("--theme", choices=["light", "dark"], default=None, help=_option_help("theme"))
    rendering.add_argument(
        "--code-theme", type=validate_pygments_theme, default=None, metavar="STYLE", help=_option_help("code_theme")
    )
    rendering.add_argument("--quiet", "-q", action="store_true", default=None, help=_option_help("quiet"))
    rendering.add_argument(
        "--max-code-lines", type=positive_int, default=None, metavar="N", help=_option_help("max_code_lines")
    )
    rendering.add_argument("--text-font", default=None, metavar="NAME", help=_option_help("text_font"))
    rendering.add_argument("--code-font", default=None, metavar="NAME", help=_option_help("code_font"))
    rendering.add_argument("--text-font-path", default=None, metavar="TTF", help=_option_help("text_font_path"))
    rendering.add_argument("--code-font-path", default=None, metavar="TTF", help=_option_help("code_font_path"))
    rendering.add_argument(
        "--fail-on-resource-errors",
        action="store_true",
        default=None,
        help="Abort when an image is missing or cannot be loaded instead of skipping it",
    )

    parsing = parser.add_argument_group("parsing options")
    parsing.add_argument(
        "--no-escape-code-comments",
        dest="escape_code_comments",
        action="store_false",
        default=None,
        help="Do not protect // and ## lines inside fenced code blocks",
    )
    parsing.add_argument(
        "--base-dir", default=None, metavar="DIR", help="Directory for resolving .code and .image paths"
    )

    general = parser.add_argument_group("general options")
    general.add_argument("--config", metavar="PATH", help="Configuration file (TOML, YAML or JSON)")
    general.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    general.add_argument("--log-file", metavar="PATH", help="Also write log output to this file")
    general.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    general.add_argument("--list-themes", action="store_true", help="List slide color themes and exit")
    general.add_argument("--list-code-themes", action="store_true", help="List Pygments code styles and exit")

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
