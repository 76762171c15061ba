#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/utils/entities.py
"""Character reference decoding for the markup subset.

Only the handful of references that Markdown-to-HTML conversion emits are
recognized. Decoding is a single pass so that an escaped ampersand such as
``&amp;lt;`` yields the literal text ``&lt;`` rather than ``<``.
"""

from __future__ import annotations

import re

from present2pdf.constants import COMMENT_ESCAPE_MARKER

ENTITY_MAP: dict[str, str] = {
    "&lt;": "<",
    "&gt;": ">",
    "&amp;": "&",
    "&quot;": '"',
    "&#34;": '"',
    "&#39;": "'",
    "&#x27;": "'",
    "&apos;": "'",
}

_ENTITY_RE = re.compile("|".join(re.escape(entity) for entity in ENTITY_MAP))
_TAG_RE = re.compile(r"<[^>]+>")


def decode_html_entities(text: str) -> str:
    """Replace the supported character references with their literal characters.

    Parameters
    ----------
    text : str
        Text that may contain character references

    Returns
    -------
    str
        Decoded text. Unknown references are left untouched.

    Examples
    --------
    >>> decode_html_entities("&lt;x&gt; &amp; &quot;y&quot;")
    '<x> & "y"'

    """
    if "&" not in text:
        return text
    return _ENTITY_RE.sub(lambda match: ENTITY_MAP[match.group(0)], text)


def strip_html_tags(html: str) -> str:
    """Remove all tags from ``html`` and decode the remaining text."""
    return decode_html_entities(_TAG_RE.sub("", html))


def strip_escape_markers(text: str) -> str:
    """Remove comment-escape markers inserted before parsing."""
    return text.replace(COMMENT_ESCAPE_MARKER, "")
