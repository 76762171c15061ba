#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/ast/visitors.py
"""Visitor base class for the presentation document model."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from present2pdf.ast.nodes import (
    BulletList,
    CodeBlock,
    Document,
    HTMLFragment,
    Image,
    Link,
    Slide,
    Text,
)


class NodeVisitor(ABC):
    """Abstract base class for document visitors.

    Subclasses implement one ``visit_*`` method per node type. The PDF
    renderer is the main implementation; each content visit returns the
    vertical cursor after the element.
    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit the root Document node."""
        pass

    @abstractmethod
    def visit_slide(self, node: Slide) -> Any:
        """Visit a Slide node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_html_fragment(self, node: HTMLFragment) -> Any:
        """Visit an HTMLFragment node."""
        pass
