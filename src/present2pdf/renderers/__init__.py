#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/present2pdf/renderers/__init__.py
"""Renderers that draw a parsed presentation.

- SlidePdfRenderer: A4 landscape slide deck PDF (requires reportlab)

The underscore modules are the layout building blocks the PDF renderer is
assembled from: the markup splitter and inline formatter, the code
highlighter, the flow renderer and the drawing surface.

Examples
--------
    >>> from present2pdf.renderers import SlidePdfRenderer
    >>> SlidePdfRenderer().render(doc, "talk.pdf")

"""

from present2pdf.renderers.base import BaseRenderer
from present2pdf.renderers.pdf import SlidePdfRenderer

__all__ = ["BaseRenderer", "SlidePdfRenderer"]
