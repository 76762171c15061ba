#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/renderers/_highlight.py
"""Syntax highlighting for slide code blocks.

Code is tokenized with Pygments and each token is given an RGB color from a
Pygments style. Tokens whose style entry has no color get one from a small
fallback table keyed by token category. The colored token stream is then cut
into lines for drawing.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any, Optional

from present2pdf.constants import DEFAULT_CODE_LANGUAGE, DEFAULT_CODE_THEME, LANGUAGE_BY_EXTENSION
from present2pdf.themes import RGB

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorToken:
    """A fragment of code text with its display color."""

    text: str
    color: RGB


CodeLine = list[ColorToken]


def detect_language(filename: Optional[str]) -> str:
    """Map a file name to a lexer name by its extension.

    Parameters
    ----------
    filename : str or None
        File name or path, e.g. ``"hello.py"``

    Returns
    -------
    str
        Lexer name; ``"go"`` when the extension is missing or unknown

    """
    if not filename:
        return DEFAULT_CODE_LANGUAGE
    ext = PurePath(filename).suffix.lstrip(".").lower()
    return LANGUAGE_BY_EXTENSION.get(ext, DEFAULT_CODE_LANGUAGE)


def get_lexer(language: str) -> Any:
    """Return a Pygments lexer for ``language``, or the plain-text lexer if unknown."""
    from pygments.lexers import get_lexer_by_name
    from pygments.lexers.special import TextLexer
    from pygments.util import ClassNotFound

    options = {"stripnl": False, "ensurenl": False, "tabsize": 4}
    try:
        return get_lexer_by_name(language, **options)
    except ClassNotFound:
        logger.debug(f"No lexer for language '{language}', using plain text")
        return TextLexer(**options)


def get_style(name: str) -> Any:
    """Return the Pygments style class ``name``, falling back to monokai."""
    from pygments.styles import get_style_by_name
    from pygments.util import ClassNotFound

    try:
        return get_style_by_name(name)
    except ClassNotFound:
        logger.debug(f"Unknown code style '{name}', using {DEFAULT_CODE_THEME}")
        return get_style_by_name(DEFAULT_CODE_THEME)


def _hex_to_rgb(value: str) -> RGB:
    value = value.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def fallback_color(ttype: Any, default: RGB) -> RGB:
    """Pick a color for a token type from the built-in category table.

    Builtins and class names are checked before other names so they keep
    their own color.
    """
    from pygments.token import Comment, Keyword, Name, Number, Operator, String

    if ttype in Keyword:
        return 198, 120, 221
    if ttype in String:
        return 152, 195, 121
    if ttype in Comment:
        return 92, 99, 112
    if ttype in Name.Builtin or ttype in Name.Class:
        return 229, 192, 123
    if ttype in Name:
        return 97, 175, 239
    if ttype in Number:
        return 209, 154, 102
    if ttype in Operator:
        return 198, 120, 221
    return default


def token_color(ttype: Any, style: Any, default: RGB) -> RGB:
    """Resolve the color of a token type under a Pygments style.

    Parameters
    ----------
    ttype : pygments token type
        Token category, e.g. ``Token.Keyword``
    style : pygments Style class
        Style providing explicit colors
    default : RGB
        Color for categories neither the style nor the fallback table cover

    """
    color = style.style_for_token(ttype).get("color")
    if color:
        return _hex_to_rgb(color)
    return fallback_color(ttype, default)


def highlight_code(code: str, language: str, style_name: str, default: RGB) -> list[ColorToken]:
    """Tokenize and color code text.

    Parameters
    ----------
    code : str
        Source code to highlight
    language : str
        Lexer name; unknown names use the plain-text lexer
    style_name : str
        Pygments style name; unknown names use monokai
    default : RGB
        Color for uncolored text and for the unhighlighted fallback

    Returns
    -------
    list[ColorToken]
        Colored tokens in source order. If the lexer fails, the whole text is
        returned as a single token in the default color.

    """
    lexer = get_lexer(language)
    style = get_style(style_name)

    try:
        return [
            ColorToken(text=value, color=token_color(ttype, style, default)) for ttype, value in lexer.get_tokens(code)
        ]
    except Exception as e:
        logger.debug(f"Highlighting failed for language '{language}', drawing plain code: {e}")
        return [ColorToken(text=code.expandtabs(4), color=default)]


def split_tokens_into_lines(tokens: list[ColorToken]) -> list[CodeLine]:
    """Cut a token stream into lines at embedded newlines.

    Every newline closes the current line, even an empty one. Text between
    newlines keeps its token's color; empty pieces produce no token. The
    final line is always included, so N newlines give N+1 lines.

    Parameters
    ----------
    tokens : list[ColorToken]
        Colored tokens, possibly containing newlines

    Returns
    -------
    list[CodeLine]
        Lines of tokens without newlines; empty list for empty input

    """
    if not tokens:
        return []

    lines: list[CodeLine] = []
    current: CodeLine = []
    for token in tokens:
        parts = token.text.split("\n")
        for index, part in enumerate(parts):
            if index > 0:
                lines.append(current)
                current = []
            if part:
                current.append(ColorToken(text=part, color=token.color))
    lines.append(current)
    return lines


def highlight_lines(code: str, language: str, style_name: str, default: RGB) -> list[CodeLine]:
    """Highlight code and return it as lines of colored tokens."""
    return split_tokens_into_lines(highlight_code(code, language, style_name, default))
