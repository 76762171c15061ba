#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/themes.py
"""Color themes for slide rendering.

A :class:`Theme` is a read-only table of RGB triples. The renderer passes the
active theme explicitly to the flow renderer and the code highlighter; there
is no module-level "current theme".

"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from present2pdf.constants import DEFAULT_THEME
from present2pdf.exceptions import ValidationError

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Theme:
    """Color set for one presentation theme.

    Parameters
    ----------
    name : str
        Theme identifier
    title_background, title_text, title_subtext, title_date : RGB
        Colors of the title slide
    slide_background, slide_title, slide_line, slide_text : RGB
        Colors of content slides (``slide_line`` is the rule under the title)
    code_background, code_text, code_line_number : RGB
        Code block box, unstyled code text, and the truncation marker
    link : RGB
        Hyperlink text and underline
    blockquote_background, blockquote_border : RGB
        Blockquote box and its left border
    inline_code_background, inline_code_text : RGB
        Inline ``<code>`` spans inside flowed text

    """

    name: str
    title_background: RGB
    title_text: RGB
    title_subtext: RGB
    title_date: RGB
    slide_background: RGB
    slide_title: RGB
    slide_line: RGB
    slide_text: RGB
    code_background: RGB
    code_text: RGB
    code_line_number: RGB
    link: RGB
    blockquote_background: RGB
    blockquote_border: RGB
    inline_code_background: RGB
    inline_code_text: RGB


LIGHT_THEME = Theme(
    name="light",
    title_background=(41, 128, 185),
    title_text=(255, 255, 255),
    title_subtext=(236, 240, 241),
    title_date=(236, 240, 241),
    slide_background=(255, 255, 255),
    slide_title=(41, 128, 185),
    slide_line=(41, 128, 185),
    slide_text=(0, 0, 0),
    code_background=(40, 44, 52),
    code_text=(171, 178, 191),
    code_line_number=(128, 128, 128),
    link=(0, 102, 204),
    blockquote_background=(240, 247, 255),
    blockquote_border=(41, 128, 185),
    inline_code_background=(240, 240, 240),
    inline_code_text=(199, 37, 78),
)

DARK_THEME = Theme(
    name="dark",
    title_background=(30, 30, 46),
    title_text=(205, 214, 244),
    title_subtext=(166, 173, 200),
    title_date=(137, 180, 250),
    slide_background=(36, 39, 58),
    slide_title=(137, 180, 250),
    slide_line=(137, 180, 250),
    slide_text=(205, 214, 244),
    code_background=(30, 30, 46),
    code_text=(205, 214, 244),
    code_line_number=(108, 112, 134),
    link=(137, 180, 250),
    blockquote_background=(48, 52, 72),
    blockquote_border=(137, 180, 250),
    inline_code_background=(49, 50, 68),
    inline_code_text=(243, 139, 168),
)

THEMES: dict[str, Theme] = {
    LIGHT_THEME.name: LIGHT_THEME,
    DARK_THEME.name: DARK_THEME,
}


def get_theme(name: str | None = None) -> Theme:
    """Look up a built-in theme by name.

    Parameters
    ----------
    name : str or None
        Theme name; None selects the default theme

    Returns
    -------
    Theme
        The matching theme

    Raises
    ------
    ValidationError
        If no theme has that name

    """
    key = (name or DEFAULT_THEME).lower()
    try:
        return THEMES[key]
    except KeyError as e:
        raise ValidationError(
            f"Unknown theme '{name}'. Available themes: {', '.join(get_available_themes())}",
            parameter_name="theme",
            parameter_value=name,
            original_error=e,
        ) from e


def get_available_themes() -> list[str]:
    """Return the names of the built-in themes."""
    return sorted(THEMES)


def get_available_code_styles() -> list[str]:
    """Return the Pygments style names usable as a code theme."""
    from pygments.styles import get_all_styles

    return sorted(get_all_styles())
