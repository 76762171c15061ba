#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/renderers/_flow.py
"""Word-wrapped text layout on a drawing surface.

:class:`FlowRenderer` places styled :class:`~present2pdf.renderers._markup.TextRun`
sequences with greedy word wrapping, and draws highlighted code lines token by
token. The core fonts have no usable bold or oblique variants for every
registered font, so bold is simulated by drawing each word twice with a small
horizontal offset and italic by shearing the word around its origin.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from present2pdf.constants import (
    BOLD_OFFSET,
    CODE_FONT_SIZE,
    INLINE_CODE_FONT_SIZE,
    ITALIC_SKEW_DEGREES,
    LINK_UNDERLINE_WIDTH,
)
from present2pdf.renderers._highlight import CodeLine
from present2pdf.renderers._markup import TextRun
from present2pdf.renderers._surface import Surface
from present2pdf.themes import RGB, Theme

logger = logging.getLogger(__name__)


@dataclass
class LayoutCursor:
    """Write position for one flow pass.

    Parameters
    ----------
    left : float
        Left edge of the flow area; wrapped lines restart here
    y : float
        Top of the current line
    width : float
        Width of the flow area
    line_height : float
        Distance between successive lines
    x : float
        Horizontal write position on the current line

    """

    left: float
    y: float
    width: float
    line_height: float
    x: float = 0.0

    def __post_init__(self) -> None:
        self.x = self.left

    @property
    def at_line_start(self) -> bool:
        return self.x <= self.left

    def fits(self, advance: float) -> bool:
        return self.x + advance <= self.left + self.width

    def newline(self) -> None:
        self.x = self.left
        self.y += self.line_height


class FlowRenderer:
    """Lay out text runs and code lines on a surface.

    Parameters
    ----------
    surface : Surface
        Drawing target
    theme : Theme
        Colors for links and inline code
    text_font : str
        Font for regular runs
    code_font : str
        Monospace font for inline code and code lines

    """

    def __init__(self, surface: Surface, theme: Theme, text_font: str, code_font: str):
        self.surface = surface
        self.theme = theme
        self.text_font = text_font
        self.code_font = code_font

    def render_runs(
        self,
        runs: list[TextRun],
        x: float,
        y: float,
        width: float,
        line_height: float,
        font_size: float,
        color: RGB,
    ) -> float:
        """Flow styled runs into wrapped lines.

        Each word is measured together with one trailing space in its own
        style. A word that would cross the right edge starts a new line,
        unless it is already the first word on the line.

        Parameters
        ----------
        runs : list[TextRun]
            Runs in reading order
        x, y : float
            Top-left corner of the first line
        width : float
            Available width
        line_height : float
            Line pitch
        font_size : float
            Point size for regular text
        color : RGB
            Ambient text color

        Returns
        -------
        float
            Vertical position below the last line, or ``y`` when nothing
            was placed

        """
        cursor = LayoutCursor(left=x, y=y, width=width, line_height=line_height)
        placed = False

        for run in runs:
            if run.code:
                self.surface.set_font(self.code_font, INLINE_CODE_FONT_SIZE)
            else:
                self.surface.set_font(self.text_font, font_size)

            for word in run.text.split():
                advance = self.surface.string_width(word + " ")
                if not cursor.fits(advance) and not cursor.at_line_start:
                    cursor.newline()
                self._draw_word(word, run, cursor, color)
                cursor.x += advance
                placed = True

            # Back to the ambient style after every run
            self.surface.set_font(self.text_font, font_size)
            self.surface.set_text_color(color)

        return cursor.y + line_height if placed else y

    def _draw_word(self, word: str, run: TextRun, cursor: LayoutCursor, color: RGB) -> None:
        surface = self.surface
        word_width = surface.string_width(word)
        x, y, line_height = cursor.x, cursor.y, cursor.line_height

        if run.code:
            surface.fill_rect(x, y + 0.5, word_width, line_height - 1, self.theme.inline_code_background)
            surface.set_text_color(self.theme.inline_code_text)
        elif run.link:
            surface.set_text_color(self.theme.link)
        else:
            surface.set_text_color(color)

        if run.italic:
            with surface.skewed(x, y + line_height, ITALIC_SKEW_DEGREES):
                self._draw_weighted(word, x, y, line_height, run.bold)
        else:
            self._draw_weighted(word, x, y, line_height, run.bold)

        if run.link:
            underline_y = y + line_height - 1
            surface.line(x, underline_y, x + word_width, underline_y, self.theme.link, LINK_UNDERLINE_WIDTH)
            surface.link(x, y, word_width, line_height, run.link)

    def _draw_weighted(self, word: str, x: float, y: float, line_height: float, bold: bool) -> None:
        self.surface.text(x, y, word, line_height)
        if bold:
            self.surface.text(x + BOLD_OFFSET, y, word, line_height)

    def render_code_line(self, line: CodeLine, x: float, y: float, line_height: float) -> float:
        """Draw one highlighted code line without wrapping.

        Returns
        -------
        float
            Horizontal position after the last token

        """
        self.surface.set_font(self.code_font, CODE_FONT_SIZE)
        cursor_x = x
        for token in line:
            self.surface.set_text_color(token.color)
            self.surface.text(cursor_x, y, token.text, line_height)
            cursor_x += self.surface.string_width(token.text)
        return cursor_x

    def measure_runs(
        self, runs: list[TextRun], x: float, y: float, width: float, line_height: float, font_size: float
    ) -> float:
        """Return the end position :meth:`render_runs` would reach, drawing nothing."""
        with self.surface.suppressed():
            return self.render_runs(runs, x, y, width, line_height, font_size, self.surface.text_color)
