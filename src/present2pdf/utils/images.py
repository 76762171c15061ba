#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/utils/images.py
"""Image placement helpers for slide rendering."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from present2pdf.constants import CONTENT_WIDTH, CONTENT_X


@dataclass(frozen=True)
class ImagePlacement:
    """Where and how large an image is drawn on the page (mm)."""

    width: float
    height: float
    x: float


def fit_image(
    native_width: float,
    native_height: float,
    max_height: float,
    max_width: float = CONTENT_WIDTH,
    left: float = CONTENT_X,
) -> ImagePlacement:
    """Scale an image uniformly to fit the remaining slide area.

    Parameters
    ----------
    native_width, native_height : float
        Intrinsic image dimensions
    max_height : float
        Vertical space left between the cursor and the bottom boundary
    max_width : float, default CONTENT_WIDTH
        Horizontal bound (the slide content width)
    left : float, default CONTENT_X
        Left edge of the content area

    Returns
    -------
    ImagePlacement
        Draw size and the horizontal offset that centers the image. An image
        without measurable dimensions gets the full content width and zero
        height.

    """
    if native_width <= 0 or native_height <= 0:
        return ImagePlacement(width=max_width, height=0.0, x=left)

    scale = min(max_width / native_width, max_height / native_height)
    width = min(native_width * scale, max_width)
    height = min(native_height * scale, max_height)
    return ImagePlacement(width=width, height=height, x=left + (max_width - width) / 2)


def image_format(path: str | Path) -> str:
    """Return the upper-case format name for ``path`` based on its extension (JPG -> JPEG)."""
    ext = Path(path).suffix.lstrip(".").upper()
    return "JPEG" if ext == "JPG" else ext
