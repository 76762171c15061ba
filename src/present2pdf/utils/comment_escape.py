#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/utils/comment_escape.py
"""Protect comment-like lines inside fenced code blocks.

The presentation parser treats a line that starts with ``//`` as a
presentation comment and drops it, and treats ``#``-prefixed lines as section
markers. Fenced code regularly starts lines with exactly those characters
(Go and C comments, shell comments, shebangs, ``##`` pragmas), so before the
source reaches the parser every such line inside a fence is prefixed with a
zero-width marker. The marker has no rendered width and is stripped again
before any text is drawn (see :func:`present2pdf.utils.entities.strip_escape_markers`).

Only the first character position of a line is considered; lines outside a
fence are never modified, so ``## Section`` headers keep working.

"""

from __future__ import annotations

import logging
import re

from present2pdf.constants import COMMENT_ESCAPE_MARKER, COMMENT_PREFIXES

logger = logging.getLogger(__name__)

# A fence line is the backtick run alone, optionally followed by a language tag
_FENCE_RE = re.compile(r"^ {0,3}```[^`\s]*\s*$")


def is_fence_line(line: str) -> bool:
    """Return True when ``line`` opens or closes a fenced code block."""
    return bool(_FENCE_RE.match(line))


def is_markdown_source(source: str) -> bool:
    """Return True for Markdown-enabled presentations (first line ``# Title``)."""
    first_line = source.split("\n", 1)[0]
    return first_line.startswith("# ")


def escape_fenced_comments(source: str) -> str:
    """Prefix comment-introducing lines inside code fences with the escape marker.

    Parameters
    ----------
    source : str
        Raw presentation source

    Returns
    -------
    str
        Source with the same number of lines. Inside a fence, each line
        beginning with ``#`` (including ``##`` and ``#!``) or ``//`` gains a
        leading zero-width marker; all other lines are returned unchanged.

    Examples
    --------
    >>> escape_fenced_comments("```go\\n// note\\n```")
    '```go\\n\\u200c// note\\n```'

    """
    if "```" not in source:
        return source

    lines = source.split("\n")
    in_fence = False
    escaped = 0

    for index, line in enumerate(lines):
        if is_fence_line(line):
            in_fence = not in_fence
            continue
        if in_fence and line.startswith(COMMENT_PREFIXES):
            lines[index] = COMMENT_ESCAPE_MARKER + line
            escaped += 1

    if escaped:
        logger.debug(f"Escaped {escaped} comment line(s) inside code fences")
    return "\n".join(lines)


def preprocess_markdown_comments(source: str) -> str:
    """Apply :func:`escape_fenced_comments` to Markdown-enabled presentations.

    Legacy presentations have no fenced blocks of their own, so they are
    returned untouched.
    """
    if not is_markdown_source(source):
        return source
    return escape_fenced_comments(source)
