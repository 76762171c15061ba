"""Test utilities for the present2pdf test suite.

This module provides a recording drawing surface so slide layout can be
asserted without parsing PDF bytes, plus small file helpers.
"""

import base64
import shutil
import tempfile
from pathlib import Path

from present2pdf.renderers._surface import Surface

# Base64 encoded 1x1 pixel PNG for testing
MINIMAL_PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/w8AAn8B9FpQHLwAAAAASUVORK5CYII="
MINIMAL_PNG_BYTES = base64.b64decode(MINIMAL_PNG_B64)

# Every character is this wide (mm) on the recording surface
CHAR_WIDTH = 2.0


class RecordingSurface(Surface):
    """Surface that records drawing calls.

    Text is measured as ``CHAR_WIDTH`` per character, whatever the font.
    Image sizes come from :attr:`images`; unknown paths raise OSError like
    an unreadable file.
    """

    def __init__(self):
        super().__init__()
        self.calls: list[tuple] = []
        self.images: dict[str, tuple[float, float]] = {}

    def string_width(self, text: str) -> float:
        return len(text) * CHAR_WIDTH

    def image_size(self, path: str) -> tuple[float, float]:
        if path not in self.images:
            raise OSError(f"cannot identify image file {path!r}")
        return self.images[path]

    def _new_page(self) -> None:
        self.calls.append(("new_page",))

    def _fill_rect(self, x, y, w, h, color) -> None:
        self.calls.append(("fill_rect", x, y, w, h, color))

    def _text(self, x, baseline, text) -> None:
        self.calls.append(("text", x, baseline, text, self.font_name, self.font_size, self.text_color))

    def _line(self, x1, y1, x2, y2, color, width) -> None:
        self.calls.append(("line", x1, y1, x2, y2, color, width))

    def _link(self, x, y, w, h, url) -> None:
        self.calls.append(("link", x, y, w, h, url))

    def _image(self, path, x, y, w, h) -> None:
        self.calls.append(("image", path, x, y, w, h))

    def _begin_skew(self, x, y, degrees) -> None:
        self.calls.append(("skew", x, y, degrees))

    def _end_skew(self) -> None:
        self.calls.append(("end_skew",))

    # Convenience accessors for assertions

    def of_kind(self, kind: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == kind]

    def texts(self) -> list[str]:
        return [call[3] for call in self.of_kind("text")]

    def pages(self) -> list[list[tuple]]:
        """Split recorded calls into pages."""
        pages: list[list[tuple]] = []
        for call in self.calls:
            if call[0] == "new_page":
                pages.append([])
            elif pages:
                pages[-1].append(call)
        return pages


def page_texts(page: list[tuple]) -> list[str]:
    return [call[3] for call in page if call[0] == "text"]


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
