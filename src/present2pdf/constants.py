#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for present2pdf.

This module centralizes the hardcoded values, magic numbers, and default
configuration constants used across present2pdf.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Page Geometry - Page size, margins and content boundaries (millimetres)
3. Typography - Font sizes (points) and line heights (millimetres)
4. Code Blocks - Highlighting defaults and truncation policy
5. Preprocessing - Comment-escape marker and fence detection
6. Dependencies - Third-party packages required per feature
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ThemeName = Literal["light", "dark"]
TextAlign = Literal["L", "C", "R"]

# =============================================================================
# Page Geometry (mm, origin at the top-left corner, A4 landscape)
# =============================================================================

PAGE_WIDTH = 297.0
PAGE_HEIGHT = 210.0

CONTENT_X = 20.0
CONTENT_WIDTH = 257.0
CONTENT_TOP = 45.0
CONTENT_BOTTOM = 190.0

SLIDE_TITLE_Y = 15.0
SLIDE_TITLE_LINE_HEIGHT = 12.0
SLIDE_TITLE_RULE_Y = 36.0
SLIDE_TITLE_RULE_WIDTH = 0.5

LIST_BULLET_X = 25.0
LIST_TEXT_X = 30.0
LIST_TEXT_WIDTH = 247.0

CODE_TEXT_X = 25.0

BLOCKQUOTE_BORDER_WIDTH = 4.0
BLOCKQUOTE_TEXT_X = 28.0
BLOCKQUOTE_TEXT_WIDTH = 249.0
BLOCKQUOTE_PADDING = 4.0
BLOCKQUOTE_PARAGRAPH_SPACING = 3.0

# Images smaller than this much vertical space are not placed at all
MIN_IMAGE_SPACE = 5.0

# =============================================================================
# Typography (font sizes in points, distances in mm)
# =============================================================================

DEFAULT_TEXT_FONT = "Helvetica"
DEFAULT_CODE_FONT = "Courier"

TITLE_FONT_SIZE = 54
TITLE_LINE_HEIGHT = 23.0
TITLE_Y = 70.0
SUBTITLE_FONT_SIZE = 30
SUBTITLE_LINE_HEIGHT = 15.0
SUBTITLE_Y = 95.0
AUTHOR_FONT_SIZE = 21
AUTHOR_LINE_HEIGHT = 12.0
AUTHOR_Y = 130.0
AUTHOR_SPACING = 15.0
DATE_FONT_SIZE = 18
DATE_LINE_HEIGHT = 9.0
DATE_Y = 180.0

SLIDE_TITLE_FONT_SIZE = 29

PLAIN_TEXT_FONT_SIZE = 21
PLAIN_TEXT_LINE_HEIGHT = 11.0
PLAIN_TEXT_SPACING = 4.0

BODY_FONT_SIZE = 18
INLINE_CODE_FONT_SIZE = 16
PARAGRAPH_LINE_HEIGHT = 11.0
PARAGRAPH_SPACING = 5.0

LIST_LINE_HEIGHT = 9.0
LIST_ITEM_SPACING = 3.0
LIST_END_SPACING = 6.0
LIST_BULLET = "• "

LINK_FONT_SIZE = 18
LINK_LINE_HEIGHT = 11.0
LINK_SPACING = 4.0
LINK_UNDERLINE_WIDTH = 0.2

FALLBACK_TEXT_LINE_HEIGHT = 9.0
FALLBACK_TEXT_SPACING = 3.0

IMAGE_SPACING = 5.0

# Simulated weight/slant for fonts without bold or italic faces
BOLD_OFFSET = 0.2
ITALIC_SKEW_DEGREES = 12.0

# =============================================================================
# Code Blocks
# =============================================================================

DEFAULT_CODE_THEME = "monokai"
DEFAULT_CODE_LANGUAGE = "go"
DEFAULT_MAX_CODE_LINES = 20
CODE_FONT_SIZE = 11
CODE_LINE_HEIGHT = 6.0
CODE_TOP_PADDING = 2.0
CODE_BOX_PADDING = 5.0
CODE_SPACING = 12.0
CODE_ELLIPSIS = "..."

LANGUAGE_BY_EXTENSION: dict[str, str] = {
    "go": "go",
    "py": "python",
    "js": "javascript",
    "ts": "typescript",
    "java": "java",
    "c": "c",
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "rs": "rust",
    "rb": "ruby",
    "php": "php",
    "sh": "bash",
    "bash": "bash",
    "html": "html",
    "css": "css",
    "json": "json",
    "xml": "xml",
    "yaml": "yaml",
    "yml": "yaml",
    "sql": "sql",
}

SUPPORTED_IMAGE_FORMATS = frozenset({"JPEG", "PNG", "GIF"})

# =============================================================================
# Preprocessing
# =============================================================================

# ZERO WIDTH NON-JOINER: no advance width, survives the present parser
COMMENT_ESCAPE_MARKER = "\u200c"
CODE_FENCE = "```"
COMMENT_PREFIXES = ("//", "#")

# =============================================================================
# Misc
# =============================================================================

DEFAULT_CREATOR = "present2pdf"
DEFAULT_THEME: ThemeName = "light"
CONFIG_ENV_VAR = "PRESENT2PDF_CONFIG"

# =============================================================================
# Dependencies: (install_name, import_name, version_spec)
# =============================================================================

DEPS_PDF_RENDER = [("reportlab", "reportlab", ">=4.0.0")]
DEPS_HIGHLIGHT = [("pygments", "pygments", ">=2.15")]
DEPS_HTML = [("beautifulsoup4", "bs4", "")]
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
