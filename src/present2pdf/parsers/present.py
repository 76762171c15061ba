#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/parsers/present.py
"""Present-format parser.

This module reads slide decks written in the Go "present" text format into
the present2pdf document model. Two flavours are supported:

- Markdown documents begin with ``# Title`` and start sections with
  ``## Section``. Section text is converted to HTML with mistune.
- Legacy documents begin with a bare title line and start sections with
  ``* Section``. Section text is split into bullets, indented code and
  plain text.

Both flavours share the header (title, subtitle, date, tags), author blocks,
``//`` comment lines and the ``.code``, ``.play``, ``.link`` and ``.image``
directives.

Because a ``//`` line is always a comment and a ``## `` line always opens a
section, code in Markdown fences is protected first by
:func:`~present2pdf.utils.comment_escape.preprocess_markdown_comments`.

"""

from __future__ import annotations

import datetime
import logging
import re
import shlex
from pathlib import Path
from typing import Any, Optional

from present2pdf.ast.nodes import (
    Author,
    BulletList,
    CodeBlock,
    Document,
    HTMLFragment,
    Image,
    Link,
    Node,
    Slide,
    Text,
)
from present2pdf.constants import DEPS_MARKDOWN
from present2pdf.exceptions import DirectiveError, ParsingError
from present2pdf.options.present import PresentParserOptions
from present2pdf.parsers.base import BaseParser, InputData
from present2pdf.utils.comment_escape import is_fence_line, is_markdown_source, preprocess_markdown_comments
from present2pdf.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_DATE_FORMATS = (
    "%H:%M %d %b %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%Y-%m-%d",
)
_HEADER_KEYS = ("Tags:", "Summary:", "OldURL:")
_HIGHLIGHT_SUFFIX_RE = re.compile(r"\s*// HL\w*\s*$")
_OMIT_SUFFIX = "OMIT"


def parse_date(text: str) -> Optional[datetime.date]:
    """Parse a header date line such as ``2 Jan 2006`` or ``2006-01-02``."""
    for fmt in _DATE_FORMATS:
        try:
            return datetime.datetime.strptime(text.strip(), fmt).date()
        except ValueError:
            continue
    return None


def is_comment(line: str) -> bool:
    """Present comments are lines starting with ``//``."""
    return line.startswith("//")


class PresentParser(BaseParser):
    """Parse present-format slide decks.

    Parameters
    ----------
    options : PresentParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = PresentParser()
        >>> doc = parser.parse("# Talk\\n\\n## Intro\\n\\nHello *world*\\n")
        >>> doc.slides[0].title
        'Intro'

    """

    def __init__(self, options: PresentParserOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, PresentParserOptions, "present")
        options = options or PresentParserOptions()
        super().__init__(options)
        self.options: PresentParserOptions = options
        self._base_dir = Path(options.base_dir) if options.base_dir else Path.cwd()
        self._markdown: Any = None

    @requires_dependencies("present", DEPS_MARKDOWN)
    def parse(self, input_data: InputData) -> Document:
        """Parse a presentation into a Document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Path to a ``.slide`` file, its contents, or a stream

        Returns
        -------
        Document
            Title-page metadata and the slides in source order

        Raises
        ------
        ParsingError
            If the document has no title or a ``.code`` file cannot be read
        FileNotFoundError
            If ``input_data`` is a path that does not exist

        """
        source_path = self._source_path(input_data)
        text = self._load_text_content(input_data)

        if self.options.base_dir:
            self._base_dir = Path(self.options.base_dir)
        elif source_path is not None:
            self._base_dir = source_path.resolve().parent
        else:
            self._base_dir = Path.cwd()

        return self.parse_text(text)

    def parse_text(self, text: str) -> Document:
        """Parse presentation source text already held in memory."""
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        markdown = is_markdown_source(text)
        if markdown and self.options.escape_code_comments:
            text = preprocess_markdown_comments(text)

        lines = text.split("\n")
        index = 0
        # Comments may precede the title
        while index < len(lines) and is_comment(lines[index]):
            index += 1
        if index >= len(lines) or not lines[index].strip():
            raise ParsingError("Presentation has no title line", parsing_stage="header")

        title = lines[index][2:].strip() if markdown else lines[index].strip()
        doc = Document(title=title, base_dir=str(self._base_dir))
        index = self._parse_header(lines, index + 1, doc)
        index = self._parse_authors(lines, index, doc, markdown)
        doc.slides = self._parse_sections(lines, index, markdown)

        logger.debug(
            f"Parsed {'markdown' if markdown else 'legacy'} presentation '{doc.title}' "
            f"with {len(doc.authors)} authors and {len(doc.slides)} slides"
        )
        return doc

    # ------------------------------------------------------------------
    # Header and authors
    # ------------------------------------------------------------------

    def _parse_header(self, lines: list[str], index: int, doc: Document) -> int:
        while index < len(lines):
            line = lines[index].strip()
            index += 1
            if not line:
                break
            if is_comment(line):
                continue
            key = next((k for k in _HEADER_KEYS if line.startswith(k)), None)
            if key is not None:
                value = line[len(key) :].strip()
                if key == "Tags:":
                    doc.metadata["tags"] = [tag.strip() for tag in value.split(",") if tag.strip()]
                else:
                    doc.metadata[key[:-1].lower()] = value
                continue
            date = parse_date(line)
            if date is not None:
                doc.date = date
            elif not doc.subtitle:
                doc.subtitle = line
            else:
                logger.debug(f"Ignoring unexpected header line: {line}")
        return index

    @staticmethod
    def _is_section_start(line: str, markdown: bool) -> bool:
        return line.startswith("## ") if markdown else line.startswith("* ")

    def _parse_authors(self, lines: list[str], index: int, doc: Document, markdown: bool) -> int:
        author = Author()
        while index < len(lines):
            line = lines[index]
            if self._is_section_start(line, markdown):
                break
            index += 1
            stripped = line.strip()
            if is_comment(stripped):
                continue
            if not stripped:
                if author.elements:
                    doc.authors.append(author)
                    author = Author()
                continue
            if "@" in stripped and " " not in stripped:
                author.elements.append(Link(url=f"mailto:{stripped}", label=stripped))
            elif stripped.startswith(("http://", "https://")):
                author.elements.append(Link(url=stripped))
            else:
                author.elements.append(Text(lines=[stripped]))
        if author.elements:
            doc.authors.append(author)
        return index

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _parse_sections(self, lines: list[str], index: int, markdown: bool) -> list[Slide]:
        slides: list[Slide] = []
        while index < len(lines):
            line = lines[index]
            if not self._is_section_start(line, markdown):
                index += 1
                continue
            title = line[2:].strip() if not markdown else line[3:].strip()
            body_start = index + 1
            index = body_start
            while index < len(lines) and not self._is_section_start(lines[index], markdown):
                index += 1
            body = [body_line for body_line in lines[body_start:index] if not is_comment(body_line)]
            elements = self._parse_markdown_body(body) if markdown else self._parse_legacy_body(body)
            slides.append(Slide(title=title, elements=elements, number=len(slides) + 1))
        return slides

    def _render_markdown(self, text: str) -> str:
        if self._markdown is None:
            import mistune

            self._markdown = mistune.create_markdown(escape=True, renderer="html")
        return self._markdown(text)

    def _parse_markdown_body(self, body: list[str]) -> list[Node]:
        elements: list[Node] = []
        chunk: list[str] = []
        in_fence = False

        def flush() -> None:
            text = "\n".join(chunk).strip("\n")
            chunk.clear()
            if text.strip():
                elements.append(HTMLFragment(html=self._render_markdown(text + "\n")))

        for line in body:
            if is_fence_line(line):
                in_fence = not in_fence
            if not in_fence and line.startswith("."):
                directive = self._parse_directive(line)
                if directive is not None:
                    flush()
                    elements.append(directive)
                    continue
                logger.debug(f"Unsupported directive, keeping line as text: {line}")
            chunk.append(line)
        flush()
        return elements

    def _parse_legacy_body(self, body: list[str]) -> list[Node]:
        elements: list[Node] = []
        index = 0
        while index < len(body):
            line = body[index]
            if not line.strip():
                index += 1
                continue

            if line.startswith("."):
                directive = self._parse_directive(line)
                index += 1
                if directive is None:
                    logger.debug(f"Skipping unsupported directive: {line}")
                else:
                    elements.append(directive)
                continue

            if line.startswith("- "):
                items: list[str] = []
                while index < len(body) and body[index].strip():
                    current = body[index]
                    if current.startswith("- "):
                        items.append(current[2:].strip())
                    elif items:
                        items[-1] = f"{items[-1]} {current.strip()}"
                    index += 1
                elements.append(BulletList(items=items))
                continue

            if line[0] in " \t":
                block: list[str] = []
                while index < len(body) and (not body[index].strip() or body[index][0] in " \t"):
                    block.append(body[index])
                    index += 1
                while block and not block[-1].strip():
                    block.pop()
                elements.append(CodeBlock(raw=_dedent(block)))
                continue

            if is_fence_line(line):
                fenced = [line]
                index += 1
                while index < len(body):
                    fenced.append(body[index])
                    index += 1
                    if is_fence_line(fenced[-1]):
                        break
                elements.append(Text(lines=fenced))
                continue

            text_lines: list[str] = []
            while index < len(body) and body[index].strip() and body[index][0] not in " \t.":
                if body[index].startswith("- ") or is_fence_line(body[index]):
                    break
                text_lines.append(body[index].lstrip("*").strip() if body[index].startswith("**") else body[index])
                index += 1
            elements.append(Text(lines=text_lines))
        return elements

    # ------------------------------------------------------------------
    # Directives
    # ------------------------------------------------------------------

    def _parse_directive(self, line: str) -> Optional[Node]:
        """Build the element for a ``.code``/``.play``/``.link``/``.image`` line.

        Returns None for anything that is not a supported directive.
        """
        try:
            args = shlex.split(line)
        except ValueError:
            args = line.split()
        if not args:
            return None
        name, args = args[0], args[1:]

        if name in (".code", ".play"):
            files = [arg for arg in args if not arg.startswith("-")]
            if not files:
                raise DirectiveError(name, line, f"{name} directive without a file name")
            return CodeBlock(raw=self._read_code_file(files[0], line), filename=files[0])

        if name == ".link":
            if not args:
                raise DirectiveError(name, line, ".link directive without a URL")
            return Link(url=args[0], label=" ".join(args[1:]))

        if name == ".image":
            if not args:
                raise DirectiveError(name, line, ".image directive without a path")
            height, width = (_size_arg(args[1]), _size_arg(args[2])) if len(args) >= 3 else (0, 0)
            return Image(url=args[0], height=height, width=width)

        return None

    def _read_code_file(self, name: str, line: str) -> str:
        path = Path(name)
        if not path.is_absolute():
            path = self._base_dir / path
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DirectiveError(".code", line, f"Cannot read code file {path}", original_error=e) from e

        lines = []
        for code_line in content.split("\n"):
            if code_line.rstrip().endswith(_OMIT_SUFFIX):
                continue
            lines.append(_HIGHLIGHT_SUFFIX_RE.sub("", code_line))
        return "\n".join(lines)


def _size_arg(value: str) -> int:
    """Image size arguments are integers or ``_`` for "unspecified"."""
    try:
        return int(value)
    except ValueError:
        return 0


def _dedent(lines: list[str]) -> str:
    """Remove the indentation shared by all non-blank lines."""
    indents = [len(line) - len(line.lstrip(" \t")) for line in lines if line.strip()]
    cut = min(indents) if indents else 0
    return "\n".join(line[cut:] for line in lines)
