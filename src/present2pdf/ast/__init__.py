#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/ast/__init__.py
"""Document model for parsed presentations.

- nodes: Document, Slide and the content element classes
- visitors: visitor base class used by the PDF renderer

Examples
--------
    >>> from present2pdf.ast import Document, Slide, Text
    >>> doc = Document(title="Talk", slides=[Slide(title="Intro", elements=[Text(lines=["Hello"])])])

"""

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
from present2pdf.ast.visitors import NodeVisitor

__all__ = [
    "Author",
    "BulletList",
    "CodeBlock",
    "Document",
    "HTMLFragment",
    "Image",
    "Link",
    "Node",
    "NodeVisitor",
    "Slide",
    "Text",
]
