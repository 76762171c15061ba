#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options classes for the present parser and the slide PDF renderer."""

from present2pdf.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from present2pdf.options.pdf import PdfRendererOptions
from present2pdf.options.present import PresentParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "PdfRendererOptions",
    "PresentParserOptions",
]
