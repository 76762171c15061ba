#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/renderers/base.py
"""Base classes for document renderers.

This module defines the abstract base class for renderers that turn a parsed
presentation :class:`~present2pdf.ast.Document` into an output format.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import IO, Union

from present2pdf.ast import Document
from present2pdf.exceptions import InvalidOptionsError
from present2pdf.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for document renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes]]) -> None:
        """Render the document to the specified output.

        Parameters
        ----------
        doc : Document
            Parsed presentation to render
        output : str, Path, or IO[bytes]
            Output destination. Can be:
            - File path (str or Path)
            - File-like object in binary mode

        Raises
        ------
        RenderingError
            If rendering fails

        """
        pass

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the document to bytes.

        Creates a BytesIO buffer, calls render() with it, and returns the bytes.

        Parameters
        ----------
        doc : Document
            Parsed presentation to render

        Returns
        -------
        bytes
            Rendered document as bytes

        """
        buffer = BytesIO()
        self.render(doc, buffer)
        return buffer.getvalue()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
