#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/parsers/__init__.py
"""Parsers that read presentation sources into the document model.

- PresentParser: Go "present" format, Markdown and legacy flavours
"""

from present2pdf.parsers.base import BaseParser
from present2pdf.parsers.present import PresentParser

__all__ = ["BaseParser", "PresentParser"]
