#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/utils/__init__.py
"""Utility modules for the present2pdf package.

This package contains the leaf helpers used by the parser and the renderer:
character reference decoding, comment-escape preprocessing, and image
placement.
"""

from present2pdf.utils.comment_escape import escape_fenced_comments, preprocess_markdown_comments
from present2pdf.utils.entities import decode_html_entities, strip_escape_markers, strip_html_tags
from present2pdf.utils.images import ImagePlacement, fit_image

__all__ = [
    "decode_html_entities",
    "escape_fenced_comments",
    "fit_image",
    "ImagePlacement",
    "preprocess_markdown_comments",
    "strip_escape_markers",
    "strip_html_tags",
]
