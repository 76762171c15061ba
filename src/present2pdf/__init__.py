"""present2pdf - render present-format slide decks to PDF.

present2pdf reads presentations written in the Go "present" text format
(``.slide`` files, Markdown or legacy flavour) and draws them as an A4
landscape PDF: a title slide followed by one page per section. Layout is
absolute and cursor driven; content that does not fit a slide is cut off
with a diagnostic rather than moved to another page.

Key Features
------------
- Markdown sections rendered through a small HTML subset: paragraphs,
  lists, fenced code, blockquotes and images
- Inline bold, italic, code and links with word wrapping
- Pygments syntax highlighting for code blocks and ``.code`` directives
- Light and dark slide themes
- Configuration from TOML, YAML or JSON files

Examples
--------
    >>> from present2pdf import convert
    >>> convert("talk.slide")
    PosixPath('talk.pdf')

    >>> from present2pdf import convert_to_bytes, PdfRendererOptions
    >>> pdf = convert_to_bytes(source, renderer_options=PdfRendererOptions(theme="dark"))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "present2pdf requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from present2pdf.api import convert, convert_to_bytes, parse_presentation  # noqa: E402
from present2pdf.ast import Document  # noqa: E402
from present2pdf.exceptions import (  # noqa: E402
    DependencyError,
    FileError,
    ParsingError,
    Present2PdfError,
    RenderingError,
    ValidationError,
)
from present2pdf.options import PdfRendererOptions, PresentParserOptions  # noqa: E402

__all__ = [
    "__version__",
    "convert",
    "convert_to_bytes",
    "parse_presentation",
    "Document",
    "PdfRendererOptions",
    "PresentParserOptions",
    "Present2PdfError",
    "DependencyError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
]
