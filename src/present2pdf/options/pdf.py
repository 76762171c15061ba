#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for slide PDF rendering."""

from dataclasses import dataclass, field

from present2pdf.constants import (
    DEFAULT_CODE_FONT,
    DEFAULT_CODE_THEME,
    DEFAULT_MAX_CODE_LINES,
    DEFAULT_TEXT_FONT,
    DEFAULT_THEME,
    ThemeName,
)
from present2pdf.options.base import BaseRendererOptions


# src/present2pdf/options/pdf.py
@dataclass(frozen=True)
class PdfRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a presentation to PDF.

    Pages are A4 landscape; the layout geometry is fixed. These options
    choose colors, fonts and how diagnostics are reported.

    Parameters
    ----------
    theme : {"light", "dark"}, default "light"
        Color theme for slides.
    code_theme : str, default "monokai"
        Pygments style used to color code tokens. Unknown names fall back
        to monokai.
    quiet : bool, default False
        Do not log layout diagnostics (overflow, code truncation, image
        problems). They are still collected on the renderer.
    max_code_lines : int, default 20
        Code lines drawn per block before the rest is replaced with "...".
    text_font : str, default "Helvetica"
        Font for titles and flowed text. A core PDF font name, or the name
        to register ``text_font_path`` under.
    code_font : str, default "Courier"
        Monospace font for code blocks and inline code.
    text_font_path : str or None, default None
        TrueType file to register as ``text_font`` (for scripts the core
        fonts do not cover).
    code_font_path : str or None, default None
        TrueType file to register as ``code_font``.

    """

    theme: ThemeName = field(
        default=DEFAULT_THEME,
        metadata={"help": "Color theme: light or dark", "choices": ["light", "dark"], "importance": "core"},
    )
    code_theme: str = field(
        default=DEFAULT_CODE_THEME,
        metadata={"help": "Pygments style for syntax highlighting (e.g., monokai, github-dark)", "importance": "core"},
    )
    quiet: bool = field(
        default=False,
        metadata={"help": "Suppress layout diagnostics such as overflow warnings", "importance": "core"},
    )
    max_code_lines: int = field(
        default=DEFAULT_MAX_CODE_LINES,
        metadata={"help": "Maximum code lines drawn per block", "type": int, "importance": "advanced"},
    )
    text_font: str = field(
        default=DEFAULT_TEXT_FONT,
        metadata={"help": "Font for slide text (Helvetica, Times-Roman, or a registered TTF name)", "importance": "advanced"},
    )
    code_font: str = field(
        default=DEFAULT_CODE_FONT,
        metadata={"help": "Monospace font for code", "importance": "advanced"},
    )
    text_font_path: str | None = field(
        default=None,
        metadata={"help": "Path to a TrueType font registered as the text font", "importance": "advanced"},
    )
    code_font_path: str | None = field(
        default=None,
        metadata={"help": "Path to a TrueType font registered as the code font", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the theme is unknown or ``max_code_lines`` is not positive.

        """
        if self.theme not in ("light", "dark"):
            raise ValueError(f"theme must be 'light' or 'dark', got {self.theme!r}")
        if self.max_code_lines <= 0:
            raise ValueError(f"max_code_lines must be positive, got {self.max_code_lines}")
