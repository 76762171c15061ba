#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/renderers/_surface.py
"""Page drawing surface for slide rendering.

Layout code addresses the page in millimetres with the origin at the top-left
corner, like a cell-based PDF writer. :class:`Surface` defines the drawing
primitives the layout needs and handles measurement-only passes: inside
:meth:`Surface.suppressed` every drawing call is a no-op while font state and
text measurement keep working. :class:`PdfSurface` implements the primitives
on a ReportLab canvas.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Iterator, Union

from present2pdf.constants import PAGE_HEIGHT, PAGE_WIDTH, TextAlign
from present2pdf.themes import RGB

logger = logging.getLogger(__name__)

PT_TO_MM = 25.4 / 72.0


class Surface(ABC):
    """Drawing primitives in page millimetres, top-left origin.

    Subclasses implement the underscore-prefixed primitives; the public
    methods skip them while drawing is suppressed.
    """

    def __init__(self) -> None:
        self._suppress_depth = 0
        self.font_name = ""
        self.font_size = 0.0
        self.text_color: RGB = (0, 0, 0)

    @property
    def drawing(self) -> bool:
        """False while inside :meth:`suppressed`."""
        return self._suppress_depth == 0

    @contextmanager
    def suppressed(self) -> Iterator[None]:
        """Measure layout without drawing anything."""
        self._suppress_depth += 1
        try:
            yield
        finally:
            self._suppress_depth -= 1

    def set_font(self, name: str, size: float) -> None:
        """Select the font used by :meth:`text` and :meth:`string_width` (size in points)."""
        self.font_name = name
        self.font_size = size
        self._apply_font()

    def set_text_color(self, color: RGB) -> None:
        self.text_color = color

    @abstractmethod
    def string_width(self, text: str) -> float:
        """Width of ``text`` in the current font, in millimetres."""
        ...

    @abstractmethod
    def image_size(self, path: str) -> tuple[float, float]:
        """Intrinsic pixel size of an image file."""
        ...

    def new_page(self, background: RGB) -> None:
        """Start a page filled with ``background``."""
        if self.drawing:
            self._new_page()
            self._fill_rect(0.0, 0.0, PAGE_WIDTH, PAGE_HEIGHT, background)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: RGB) -> None:
        if self.drawing:
            self._fill_rect(x, y, w, h, color)

    def text(
        self, x: float, y: float, text: str, line_height: float, width: float = 0.0, align: TextAlign = "L"
    ) -> None:
        """Draw one line of text in a cell whose top-left corner is (x, y).

        The text is vertically centered in the cell. With ``align="C"`` or
        ``"R"`` the text is positioned within ``width``.
        """
        if not self.drawing or not text:
            return
        if align != "L" and width > 0:
            offset = width - self.string_width(text)
            x += offset / 2 if align == "C" else offset
        baseline = y + line_height / 2 + 0.3 * self.font_size * PT_TO_MM
        self._text(x, baseline, text)

    def line(self, x1: float, y1: float, x2: float, y2: float, color: RGB, width: float) -> None:
        if self.drawing:
            self._line(x1, y1, x2, y2, color, width)

    def link(self, x: float, y: float, w: float, h: float, url: str) -> None:
        """Register a clickable area pointing to ``url``."""
        if self.drawing and url:
            self._link(x, y, w, h, url)

    def image(self, path: str, x: float, y: float, w: float, h: float) -> None:
        if self.drawing:
            self._image(path, x, y, w, h)

    @contextmanager
    def skewed(self, x: float, y: float, degrees: float) -> Iterator[None]:
        """Shear horizontally around (x, y) for the duration of the block."""
        active = self.drawing
        if active:
            self._begin_skew(x, y, degrees)
        try:
            yield
        finally:
            if active:
                self._end_skew()

    def _apply_font(self) -> None:
        """Hook for surfaces that keep font state in the backend."""
        pass

    @abstractmethod
    def _new_page(self) -> None: ...

    @abstractmethod
    def _fill_rect(self, x: float, y: float, w: float, h: float, color: RGB) -> None: ...

    @abstractmethod
    def _text(self, x: float, baseline: float, text: str) -> None: ...

    @abstractmethod
    def _line(self, x1: float, y1: float, x2: float, y2: float, color: RGB, width: float) -> None: ...

    @abstractmethod
    def _link(self, x: float, y: float, w: float, h: float, url: str) -> None: ...

    @abstractmethod
    def _image(self, path: str, x: float, y: float, w: float, h: float) -> None: ...

    @abstractmethod
    def _begin_skew(self, x: float, y: float, degrees: float) -> None: ...

    @abstractmethod
    def _end_skew(self) -> None: ...


class PdfSurface(Surface):
    """Surface backed by a ReportLab canvas on an A4 landscape page.

    Parameters
    ----------
    output : str, Path, or IO[bytes]
        Destination passed to the canvas
    title : str
        Document title metadata
    creator : str or None
        Creator metadata

    """

    def __init__(self, output: Union[str, Path, IO[bytes]], title: str = "", creator: str | None = None):
        super().__init__()
        from reportlab.lib.units import mm
        from reportlab.pdfgen import canvas

        self._mm = mm
        target = str(output) if isinstance(output, Path) else output
        self._canvas = canvas.Canvas(target, pagesize=(PAGE_WIDTH * mm, PAGE_HEIGHT * mm), pageCompression=1)
        if title:
            self._canvas.setTitle(title)
        if creator:
            self._canvas.setCreator(creator)
        self._page_open = False
        self._image_cache: dict[str, Any] = {}

    @staticmethod
    def register_font(name: str, path: str) -> None:
        """Register a TrueType font file under ``name``."""
        from reportlab.pdfbase import pdfmetrics
        from reportlab.pdfbase.ttfonts import TTFont

        pdfmetrics.registerFont(TTFont(name, path))
        logger.debug(f"Registered font '{name}' from {path}")

    def set_author(self, author: str) -> None:
        self._canvas.setAuthor(author)

    def string_width(self, text: str) -> float:
        from reportlab.pdfbase.pdfmetrics import stringWidth

        return stringWidth(text, self.font_name, self.font_size) / self._mm

    def _reader(self, path: str) -> Any:
        from reportlab.lib.utils import ImageReader

        if path not in self._image_cache:
            self._image_cache[path] = ImageReader(path)
        return self._image_cache[path]

    def image_size(self, path: str) -> tuple[float, float]:
        width, height = self._reader(path).getSize()
        return float(width), float(height)

    def save(self) -> None:
        """Finish the current page and write the document."""
        self._canvas.save()

    def _y(self, y: float) -> float:
        return (PAGE_HEIGHT - y) * self._mm

    @staticmethod
    def _rgb(color: RGB) -> tuple[float, float, float]:
        return color[0] / 255.0, color[1] / 255.0, color[2] / 255.0

    def _apply_font(self) -> None:
        if self.font_name:
            self._canvas.setFont(self.font_name, self.font_size)

    def _new_page(self) -> None:
        if self._page_open:
            self._canvas.showPage()
            # showPage resets the graphics state
            self._apply_font()
        self._page_open = True

    def _fill_rect(self, x: float, y: float, w: float, h: float, color: RGB) -> None:
        self._canvas.setFillColorRGB(*self._rgb(color))
        self._canvas.rect(x * self._mm, self._y(y + h), w * self._mm, h * self._mm, stroke=0, fill=1)

    def _text(self, x: float, baseline: float, text: str) -> None:
        self._canvas.setFillColorRGB(*self._rgb(self.text_color))
        self._canvas.drawString(x * self._mm, self._y(baseline), text)

    def _line(self, x1: float, y1: float, x2: float, y2: float, color: RGB, width: float) -> None:
        self._canvas.setStrokeColorRGB(*self._rgb(color))
        self._canvas.setLineWidth(width * self._mm)
        self._canvas.line(x1 * self._mm, self._y(y1), x2 * self._mm, self._y(y2))

    def _link(self, x: float, y: float, w: float, h: float, url: str) -> None:
        rect = (x * self._mm, self._y(y + h), (x + w) * self._mm, self._y(y))
        self._canvas.linkURL(url, rect, relative=0, thickness=0)

    def _image(self, path: str, x: float, y: float, w: float, h: float) -> None:
        self._canvas.drawImage(
            self._reader(path), x * self._mm, self._y(y + h), width=w * self._mm, height=h * self._mm, mask="auto"
        )

    def _begin_skew(self, x: float, y: float, degrees: float) -> None:
        px, py = x * self._mm, self._y(y)
        self._canvas.saveState()
        self._canvas.translate(px, py)
        self._canvas.skew(0, degrees)
        self._canvas.translate(-px, -py)

    def _end_skew(self) -> None:
        self._canvas.restoreState()
        # restoreState reverts the font selected inside the skewed block
        self._apply_font()
