#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by present2pdf.

Only conditions that stop a deck from being converted are exceptions. Slide
layout problems such as overflow, code truncation or a missing image are
recorded as diagnostics on the renderer and the PDF is still produced,
unless ``fail_on_resource_errors`` turns image problems into errors.

Exception Hierarchy
-------------------
- Present2PdfError

  - ValidationError (bad option or argument values)
    - InvalidOptionsError (options object of the wrong class)

  - FileError (the source deck cannot be read)
    - FileNotFoundError
    - FileAccessError

  - ParsingError (source is not a usable presentation)
    - DirectiveError (malformed ``.code``/``.link``/``.image`` line)

  - RenderingError (PDF could not be produced)
    - ImageResourceError (image unusable and failures are fatal)
    - OutputWriteError (PDF could not be written)

  - DependencyError (a required package is missing or too old)

"""

from __future__ import annotations

from typing import Any


class Present2PdfError(Exception):
    """Root of the present2pdf exception tree.

    Parameters
    ----------
    message : str
        What went wrong, suitable for showing to the user
    original_error : Exception, optional
        Lower-level exception this one wraps

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Present2PdfError):
    """An option or argument has an unusable value.

    Parameters
    ----------
    message : str
        What is wrong with the value
    parameter_name : str, optional
        Option or argument name, e.g. ``"theme"``
    parameter_value : any, optional
        Value that was rejected
    original_error : Exception, optional
        Lower-level exception this one wraps

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A parser or renderer was handed options meant for something else.

    Parameters
    ----------
    converter_name : str
        Parser or renderer name used in the message
    expected_type : type
        Options class the component accepts
    received_type : type
        Class of the object actually passed
    message : str, optional
        Replaces the generated message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = (
                f"{converter_name} takes {expected_type.__name__}, "
                f"not {received_type.__name__}"
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Present2PdfError):
    """The presentation source cannot be opened or read.

    Parameters
    ----------
    message : str
        What went wrong
    file_path : str, optional
        Path of the source file
    original_error : Exception, optional
        Underlying ``OSError``

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """The presentation source does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(
            message or f"Presentation not found: {file_path}", file_path=file_path, original_error=original_error
        )


class FileAccessError(FileError):
    """The presentation source exists but reading it failed."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(
            message or f"Cannot read presentation: {file_path}", file_path=file_path, original_error=original_error
        )


class ParsingError(Present2PdfError):
    """The source text is not a usable presentation.

    Parameters
    ----------
    message : str
        What is wrong with the source
    parsing_stage : str, optional
        ``"header"`` for the title block, ``"directive"`` for dot commands
    original_error : Exception, optional
        Lower-level exception this one wraps

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class DirectiveError(ParsingError):
    """A ``.code``, ``.play``, ``.link`` or ``.image`` line cannot be used.

    Raised for directives missing their argument and for code files that
    cannot be read.

    Parameters
    ----------
    directive : str
        Directive name including the dot, e.g. ``".code"``
    line : str
        Source line the directive came from
    message : str
        What is wrong with it
    original_error : Exception, optional
        Lower-level exception this one wraps

    """

    def __init__(self, directive: str, line: str, message: str, original_error: Exception | None = None):
        super().__init__(f"{message}: {line}", parsing_stage="directive", original_error=original_error)
        self.directive = directive
        self.line = line


class RenderingError(Present2PdfError):
    """The PDF could not be produced.

    Parameters
    ----------
    message : str
        What went wrong
    rendering_stage : str, optional
        ``"rendering"``, ``"image"`` or ``"output"``
    original_error : Exception, optional
        Lower-level exception this one wraps

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class ImageResourceError(RenderingError):
    """An ``.image`` could not be drawn while resource failures are fatal.

    Parameters
    ----------
    message : str
        Diagnostic text, naming the slide and the image
    image_path : str
        Resolved path of the image
    slide_number : int
        Slide the image belongs to, counted from 1

    """

    def __init__(self, message: str, image_path: str, slide_number: int, original_error: Exception | None = None):
        super().__init__(message, rendering_stage="image", original_error=original_error)
        self.image_path = image_path
        self.slide_number = slide_number


class OutputWriteError(RenderingError):
    """The finished PDF could not be written to its destination."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(
            message or f"Cannot write PDF to {file_path}", rendering_stage="output", original_error=original_error
        )
        self.file_path = file_path


class DependencyError(Present2PdfError):
    """A package needed for parsing or rendering is missing or too old.

    Parameters
    ----------
    converter_name : str
        Component that needs the packages, e.g. ``"pdf_render"``
    missing_packages : list of tuple
        ``(distribution, version_spec)`` pairs that failed to import
    version_mismatches : list of tuple, optional
        ``(distribution, required, installed)`` triples
    message : str, optional
        Replaces the generated message
    original_import_error : ImportError, optional
        First import failure encountered

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        version_mismatches = version_mismatches or []
        if message is None:
            lines = []
            if missing_packages:
                names = ", ".join(f"'{name}{spec}'" for name, spec in missing_packages)
                lines.append(f"{converter_name} needs {names}")
            for name, required, installed in version_mismatches:
                lines.append(f"{converter_name} needs '{name}{required}' (found {installed})")

            wanted = [f"{name}{spec}" for name, spec in missing_packages]
            wanted += [f"{name}{required}" for name, required, _ in version_mismatches]
            if wanted:
                lines.append("Install with: pip install --upgrade " + " ".join(f'"{spec}"' for spec in wanted))
            message = "\n".join(lines)

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error
