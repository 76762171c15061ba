#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/api.py
"""High-level conversion functions.

These wrap :class:`~present2pdf.parsers.present.PresentParser` and
:class:`~present2pdf.renderers.pdf.SlidePdfRenderer` for the common case of
turning one presentation into one PDF.

Examples
--------
Convert a file next to its source::

    >>> from present2pdf import convert
    >>> convert("talk.slide")
    PosixPath('talk.pdf')

Render in memory::

    >>> from present2pdf import convert_to_bytes
    >>> pdf = convert_to_bytes("# Talk\\n\\n## Intro\\n\\nHello\\n")

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from present2pdf.ast import Document
from present2pdf.options.pdf import PdfRendererOptions
from present2pdf.options.present import PresentParserOptions
from present2pdf.parsers.present import PresentParser
from present2pdf.renderers.pdf import SlidePdfRenderer
from present2pdf.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def parse_presentation(text: str, options: Optional[PresentParserOptions] = None) -> Document:
    """Parse presentation source text into a Document."""
    return PresentParser(options).parse_text(text)


def convert(
    input_path: Union[str, Path],
    output_path: Union[str, Path, None] = None,
    *,
    renderer_options: Optional[PdfRendererOptions] = None,
    parser_options: Optional[PresentParserOptions] = None,
) -> Path:
    """Convert a presentation file to PDF.

    Parameters
    ----------
    input_path : str or Path
        Presentation source file
    output_path : str, Path, or None, default None
        Destination PDF. Defaults to ``input_path`` with a ``.pdf`` suffix.
    renderer_options : PdfRendererOptions, optional
        Rendering options
    parser_options : PresentParserOptions, optional
        Parsing options

    Returns
    -------
    Path
        Path of the written PDF

    Raises
    ------
    FileNotFoundError
        If ``input_path`` does not exist
    ParsingError
        If the presentation cannot be parsed
    RenderingError
        If the PDF cannot be produced or written

    """
    source = Path(input_path)
    target = Path(output_path) if output_path is not None else source.with_suffix(".pdf")

    with debug_timer(logger, f"Parsing {source}"):
        doc = PresentParser(parser_options).parse(source)
    renderer = SlidePdfRenderer(renderer_options)
    with debug_timer(logger, f"Rendering {len(doc.slides)} slides"):
        renderer.render(doc, target)

    logger.info(f"Wrote {len(doc.slides) + 1} pages to {target}")
    if renderer.diagnostics:
        logger.info(f"{len(renderer.diagnostics)} layout diagnostics for {source}")
    return target


def convert_to_bytes(
    source_text: str,
    *,
    renderer_options: Optional[PdfRendererOptions] = None,
    parser_options: Optional[PresentParserOptions] = None,
) -> bytes:
    """Convert presentation source text to PDF bytes.

    Relative ``.code`` and ``.image`` paths resolve against
    ``parser_options.base_dir``, or the working directory when unset.
    """
    doc = PresentParser(parser_options).parse_text(source_text)
    return SlidePdfRenderer(renderer_options).render_to_bytes(doc)
