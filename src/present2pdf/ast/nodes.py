#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/ast/nodes.py
"""Node classes for the presentation document model.

A presentation is a :class:`Document` with title-slide metadata and an
ordered list of :class:`Slide` nodes. Each slide holds content elements that
the parser has already classified:

    - Text: plain text lines
    - BulletList: legacy ``- item`` bullets
    - CodeBlock: raw code with an optional filename or language hint
    - Link: a ``.link`` directive
    - Image: an ``.image`` directive
    - HTMLFragment: Markdown converted to the supported HTML subset

All nodes support the visitor pattern through ``accept``.

"""

from __future__ import annotations

import datetime
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


class Node(ABC):
    """Base class for all document nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result of the visitor's processing

        """
        ...


@dataclass
class Text(Node):
    """Plain text element.

    Parameters
    ----------
    lines : list of str
        Source lines; they are joined with spaces when rendered

    """

    lines: list[str] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class BulletList(Node):
    """Bulleted list element."""

    items: list[str] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_bullet_list``."""
        return visitor.visit_bullet_list(self)


@dataclass
class CodeBlock(Node):
    """Code block element.

    Parameters
    ----------
    raw : str
        Code text exactly as it should be displayed
    filename : str or None, default = None
        Source file name (from a ``.code`` directive); its extension selects
        the highlighting language
    language : str or None, default = None
        Explicit language identifier; takes precedence over ``filename``

    """

    raw: str
    filename: Optional[str] = None
    language: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self)


@dataclass
class Link(Node):
    """Hyperlink element; an empty label displays the URL itself."""

    url: str
    label: str = ""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image element referencing a file on disk.

    Parameters
    ----------
    url : str
        Path to the image, relative paths are resolved against the
        presentation's directory
    width, height : int, default 0
        Size hints from the directive (unused by layout, kept for fidelity)

    """

    url: str
    width: int = 0
    height: int = 0

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self)


@dataclass
class HTMLFragment(Node):
    """Markup fragment in the supported HTML subset.

    May mix paragraphs, lists, code blocks, blockquotes and images.
    """

    html: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_html_fragment``."""
        return visitor.visit_html_fragment(self)


@dataclass
class Author:
    """One author block from the title page.

    Text lines are shown on the title slide; Link elements (e-mail addresses,
    web sites) are kept for completeness but not displayed.
    """

    elements: list[Node] = field(default_factory=list)

    def text(self) -> str:
        """Return the author's lines joined into a single display string."""
        parts = [" ".join(element.lines) for element in self.elements if isinstance(element, Text)]
        return " ".join(part for part in parts if part).strip()


@dataclass
class Slide(Node):
    """One presentation section rendered as a page."""

    title: str
    elements: list[Node] = field(default_factory=list)
    number: int = 0

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_slide``."""
        return visitor.visit_slide(self)


@dataclass
class Document(Node):
    """Root node of a parsed presentation.

    Parameters
    ----------
    title : str
        Presentation title
    subtitle : str, default = ""
        Optional subtitle line
    date : datetime.date or None, default = None
        Presentation date shown on the title slide
    authors : list of Author
        Author blocks in source order
    slides : list of Slide
        Content slides in source order
    metadata : dict
        Extra header values (tags, summary)
    base_dir : str or None, default = None
        Directory that relative image paths are resolved against

    """

    title: str
    subtitle: str = ""
    date: Optional[datetime.date] = None
    authors: list[Author] = field(default_factory=list)
    slides: list[Slide] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    base_dir: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)
