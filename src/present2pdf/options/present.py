#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for parsing present-format documents."""

from dataclasses import dataclass, field

from present2pdf.options.base import BaseParserOptions


# src/present2pdf/options/present.py
@dataclass(frozen=True)
class PresentParserOptions(BaseParserOptions):
    """Configuration options for the present-format parser.

    Parameters
    ----------
    escape_code_comments : bool, default True
        Protect ``//`` and ``#`` lines inside fenced code blocks of markdown
        documents so they are not read as comments or section headers.
    base_dir : str or None, default None
        Directory against which ``.code`` and ``.image`` paths are resolved.
        Defaults to the presentation's directory, or the working directory
        for in-memory sources.

    """

    escape_code_comments: bool = field(
        default=True,
        metadata={
            "help": "Protect comment lines inside fenced code blocks from the parser",
            "cli_name": "no-escape-code-comments",
            "importance": "advanced",
        },
    )
    base_dir: str | None = field(
        default=None,
        metadata={"help": "Directory for resolving .code and .image paths", "importance": "advanced"},
    )
