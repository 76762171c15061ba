#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class for parsers that read a source
document into the present2pdf document model.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from present2pdf.ast import Document
from present2pdf.exceptions import FileAccessError, FileNotFoundError, InvalidOptionsError
from present2pdf.options.base import BaseParserOptions
from present2pdf.utils.encoding import read_text_with_encoding_detection

logger = logging.getLogger(__name__)

InputData = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: InputData) -> Document:
        """Parse the input document into a Document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            The input document to parse. Can be:
            - File path (str or Path)
            - File-like object
            - Raw document bytes
            - Document text

        Returns
        -------
        Document
            Parsed document

        Raises
        ------
        ParsingError
            If the document structure is invalid
        FileError
            If the input file cannot be read

        """
        raise NotImplementedError

    @staticmethod
    def _source_path(input_data: InputData) -> Path | None:
        """Return the file path ``input_data`` refers to, if it is one."""
        if isinstance(input_data, Path):
            return input_data
        if isinstance(input_data, str) and len(input_data) <= 260 and "\n" not in input_data:
            try:
                path = Path(input_data)
                if path.is_file():
                    return path
            except OSError:
                # Path too long or invalid - treat as content
                pass
        return None

    @staticmethod
    def _load_text_content(input_data: InputData) -> str:
        """Load text from a path, bytes, a stream, or a string of content.

        Raises
        ------
        FileNotFoundError
            If a Path does not exist
        FileAccessError
            If a file cannot be read

        """
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)

        path = BaseParser._source_path(input_data)
        if path is not None:
            if not path.exists():
                raise FileNotFoundError(str(path))
            try:
                return read_text_with_encoding_detection(path.read_bytes())
            except OSError as e:
                raise FileAccessError(str(path), original_error=e) from e

        if isinstance(input_data, str):
            return input_data

        content = input_data.read()
        if isinstance(content, bytes):
            return read_text_with_encoding_detection(content)
        return content
