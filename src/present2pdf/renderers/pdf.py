#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/renderers/pdf.py
"""Slide PDF rendering from a parsed presentation.

This module provides the SlidePdfRenderer class which draws a
:class:`~present2pdf.ast.Document` as a slide deck: a title slide followed
by one A4 landscape page per section. Layout is absolute and cursor driven:
every element is placed below the previous one, starting under the slide
title and ending at a fixed bottom boundary.

Content that does not fit is never moved to another page. Before an element
is drawn it is laid out once with drawing suppressed; if it would end past
the bottom boundary, it and everything after it on that slide is dropped and
a single diagnostic is reported. Code truncation and image problems are
reported the same way. Diagnostics are logged as warnings unless the
``quiet`` option is set, and are always collected in
:attr:`SlidePdfRenderer.diagnostics`.

"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Any, Union

from present2pdf.ast.nodes import (
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
from present2pdf.constants import (
    AUTHOR_FONT_SIZE,
    AUTHOR_LINE_HEIGHT,
    AUTHOR_SPACING,
    AUTHOR_Y,
    BLOCKQUOTE_BORDER_WIDTH,
    BLOCKQUOTE_PADDING,
    BLOCKQUOTE_PARAGRAPH_SPACING,
    BLOCKQUOTE_TEXT_WIDTH,
    BLOCKQUOTE_TEXT_X,
    BODY_FONT_SIZE,
    BOLD_OFFSET,
    CODE_BOX_PADDING,
    CODE_ELLIPSIS,
    CODE_FONT_SIZE,
    CODE_LINE_HEIGHT,
    CODE_SPACING,
    CODE_TEXT_X,
    CODE_TOP_PADDING,
    CONTENT_BOTTOM,
    CONTENT_TOP,
    CONTENT_WIDTH,
    CONTENT_X,
    DATE_FONT_SIZE,
    DATE_LINE_HEIGHT,
    DATE_Y,
    DEFAULT_CODE_LANGUAGE,
    DEPS_HIGHLIGHT,
    DEPS_HTML,
    DEPS_PDF_RENDER,
    FALLBACK_TEXT_LINE_HEIGHT,
    FALLBACK_TEXT_SPACING,
    IMAGE_SPACING,
    ITALIC_SKEW_DEGREES,
    LINK_FONT_SIZE,
    LINK_LINE_HEIGHT,
    LINK_SPACING,
    LINK_UNDERLINE_WIDTH,
    LIST_BULLET,
    LIST_BULLET_X,
    LIST_END_SPACING,
    LIST_ITEM_SPACING,
    LIST_LINE_HEIGHT,
    LIST_TEXT_WIDTH,
    LIST_TEXT_X,
    MIN_IMAGE_SPACE,
    PAGE_WIDTH,
    PARAGRAPH_LINE_HEIGHT,
    PARAGRAPH_SPACING,
    PLAIN_TEXT_FONT_SIZE,
    PLAIN_TEXT_LINE_HEIGHT,
    PLAIN_TEXT_SPACING,
    SLIDE_TITLE_FONT_SIZE,
    SLIDE_TITLE_LINE_HEIGHT,
    SLIDE_TITLE_RULE_WIDTH,
    SLIDE_TITLE_RULE_Y,
    SLIDE_TITLE_Y,
    SUBTITLE_FONT_SIZE,
    SUBTITLE_LINE_HEIGHT,
    SUBTITLE_Y,
    SUPPORTED_IMAGE_FORMATS,
    TITLE_FONT_SIZE,
    TITLE_LINE_HEIGHT,
    TITLE_Y,
)
from present2pdf.exceptions import ImageResourceError, OutputWriteError, RenderingError
from present2pdf.options.pdf import PdfRendererOptions
from present2pdf.renderers._flow import FlowRenderer
from present2pdf.renderers._highlight import detect_language, highlight_lines
from present2pdf.renderers._markup import Block, BlockKind, TextRun, parse_inline, split_blocks
from present2pdf.renderers._surface import PdfSurface, Surface
from present2pdf.renderers.base import BaseRenderer
from present2pdf.themes import get_theme
from present2pdf.utils.decorators import requires_dependencies
from present2pdf.utils.entities import strip_escape_markers
from present2pdf.utils.images import fit_image, image_format

logger = logging.getLogger(__name__)

_FENCED_CODE_RE = re.compile(r"(?s)```(\w*)\s*\n(.*?)```")

# A layout unit is either a document node or one block of a markup fragment
LayoutUnit = Union[Node, Block]


class SlidePdfRenderer(NodeVisitor, BaseRenderer):
    """Render a presentation document to a slide-deck PDF.

    Each ``visit_*`` method for a content element draws the element at the
    current vertical cursor and returns the cursor position below it.

    Parameters
    ----------
    options : PdfRendererOptions or None, default = None
        PDF rendering options

    Attributes
    ----------
    diagnostics : list of str
        Layout diagnostics from the most recent render

    Examples
    --------
        >>> from present2pdf.ast import Document, Slide, Text
        >>> from present2pdf.renderers.pdf import SlidePdfRenderer
        >>> doc = Document(title="Talk", slides=[Slide(title="Intro", elements=[Text(lines=["Hello"])])])
        >>> SlidePdfRenderer().render(doc, "talk.pdf")

    """

    def __init__(self, options: PdfRendererOptions | None = None):
        """Initialize the renderer with options."""
        BaseRenderer._validate_options_type(options, PdfRendererOptions, "pdf")
        options = options or PdfRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: PdfRendererOptions = options
        self.theme = get_theme(options.theme)
        self.diagnostics: list[str] = []
        # Set per render in render_to_surface()
        self._surface: Any = None
        self._flow: Any = None
        self._base_dir = Path.cwd()
        self._y = CONTENT_TOP
        self._slide_number = 0
        self._slide_title = ""
        self._measuring = False

    @requires_dependencies("pdf_render", DEPS_PDF_RENDER + DEPS_HIGHLIGHT + DEPS_HTML)
    def render(self, doc: Document, output: Union[str, Path, IO[bytes]]) -> None:
        """Render the document to a PDF file.

        Parameters
        ----------
        doc : Document
            Parsed presentation
        output : str, Path, or IO[bytes]
            Output destination (file path or file-like object)

        Raises
        ------
        RenderingError
            If PDF generation fails, or an image cannot be used while
            ``fail_on_resource_errors`` is set
        OutputWriteError
            If the PDF cannot be written to ``output``

        """
        try:
            self._register_fonts()
            surface = PdfSurface(output, title=doc.title, creator=self.options.creator)
            authors = ", ".join(author.text() for author in doc.authors if author.text())
            if authors:
                surface.set_author(authors)
            self.render_to_surface(doc, surface)
            surface.save()
        except RenderingError:
            raise
        except OSError as e:
            if isinstance(output, (str, Path)):
                raise OutputWriteError(str(output), original_error=e) from e
            raise RenderingError(f"Failed to write PDF: {e!r}", rendering_stage="output", original_error=e) from e
        except Exception as e:
            raise RenderingError(f"Failed to render PDF: {e!r}", rendering_stage="rendering", original_error=e) from e

    def render_to_surface(self, doc: Document, surface: Surface) -> None:
        """Lay out and draw the document on an existing surface.

        Parameters
        ----------
        doc : Document
            Parsed presentation
        surface : Surface
            Drawing target; :meth:`render` passes a ReportLab-backed surface

        """
        self.diagnostics = []
        self._surface = surface
        self._flow = FlowRenderer(surface, self.theme, self.options.text_font, self.options.code_font)
        self._base_dir = Path(doc.base_dir) if doc.base_dir else Path.cwd()
        doc.accept(self)

    def _register_fonts(self) -> None:
        if self.options.text_font_path:
            PdfSurface.register_font(self.options.text_font, self.options.text_font_path)
        if self.options.code_font_path:
            PdfSurface.register_font(self.options.code_font, self.options.code_font_path)

    def _diagnose(self, message: str) -> None:
        """Record a layout diagnostic; measuring passes report nothing."""
        if self._measuring:
            return
        self.diagnostics.append(message)
        if not self.options.quiet:
            logger.warning(message)

    def _resource_problem(self, message: str, path: Path) -> None:
        if self.options.fail_on_resource_errors:
            raise ImageResourceError(message, image_path=str(path), slide_number=self._slide_number)
        self._diagnose(message)

    # ------------------------------------------------------------------
    # Document structure
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Draw the title slide, then every content slide in order."""
        self._render_title_slide(node)
        for number, slide in enumerate(node.slides, start=1):
            self._slide_number = number
            slide.accept(self)
        logger.debug(f"Rendered {len(node.slides)} slides with {len(self.diagnostics)} diagnostics")

    def _centered(self, text: str, y: float, line_height: float, bold: bool = False, italic: bool = False) -> None:
        surface = self._surface
        x = (PAGE_WIDTH - surface.string_width(text)) / 2
        if italic:
            with surface.skewed(x, y + line_height, ITALIC_SKEW_DEGREES):
                surface.text(x, y, text, line_height)
            return
        surface.text(x, y, text, line_height)
        if bold:
            surface.text(x + BOLD_OFFSET, y, text, line_height)

    def _render_title_slide(self, doc: Document) -> None:
        surface = self._surface
        theme = self.theme
        surface.new_page(theme.title_background)

        surface.set_font(self.options.text_font, TITLE_FONT_SIZE)
        surface.set_text_color(theme.title_text)
        self._centered(strip_escape_markers(doc.title), TITLE_Y, TITLE_LINE_HEIGHT, bold=True)

        if doc.subtitle:
            surface.set_font(self.options.text_font, SUBTITLE_FONT_SIZE)
            surface.set_text_color(theme.title_subtext)
            self._centered(strip_escape_markers(doc.subtitle), SUBTITLE_Y, SUBTITLE_LINE_HEIGHT)

        surface.set_font(self.options.text_font, AUTHOR_FONT_SIZE)
        surface.set_text_color(theme.title_subtext)
        y = AUTHOR_Y
        for author in doc.authors:
            text = author.text()
            if text:
                self._centered(strip_escape_markers(text), y, AUTHOR_LINE_HEIGHT)
                y += AUTHOR_SPACING

        if doc.date is not None:
            surface.set_font(self.options.text_font, DATE_FONT_SIZE)
            surface.set_text_color(theme.title_date)
            date = doc.date
            self._centered(f"{date:%B} {date.day}, {date.year}", DATE_Y, DATE_LINE_HEIGHT, italic=True)

    def visit_slide(self, node: Slide) -> None:
        """Draw one content slide, dropping whatever does not fit."""
        surface = self._surface
        theme = self.theme
        self._slide_title = strip_escape_markers(node.title)
        surface.new_page(theme.slide_background)

        title = [TextRun(text=self._slide_title, bold=True)]
        self._flow.render_runs(
            title,
            CONTENT_X,
            SLIDE_TITLE_Y,
            CONTENT_WIDTH,
            SLIDE_TITLE_LINE_HEIGHT,
            SLIDE_TITLE_FONT_SIZE,
            theme.slide_title,
        )
        surface.line(
            CONTENT_X,
            SLIDE_TITLE_RULE_Y,
            CONTENT_X + CONTENT_WIDTH,
            SLIDE_TITLE_RULE_Y,
            theme.slide_line,
            SLIDE_TITLE_RULE_WIDTH,
        )

        y = CONTENT_TOP
        for unit in self._layout_units(node):
            end = self._measure(unit, y)
            if end > CONTENT_BOTTOM:
                self._diagnose(
                    f'slide {self._slide_number} "{self._slide_title}" does not fit - '
                    f"content overflow (y={end:.0f}), some elements cut off"
                )
                break
            y = self._place(unit, y)

    @staticmethod
    def _layout_units(slide: Slide) -> list[LayoutUnit]:
        """Flatten slide elements so markup fragments are placed block by block."""
        units: list[LayoutUnit] = []
        for element in slide.elements:
            if isinstance(element, HTMLFragment):
                units.extend(split_blocks(element.html))
            else:
                units.append(element)
        return units

    def _place(self, unit: LayoutUnit, y: float) -> float:
        self._y = y
        if isinstance(unit, Block):
            return self._render_block(unit, y)
        result = unit.accept(self)
        return y if result is None else result

    def _measure(self, unit: LayoutUnit, y: float) -> float:
        """Return where ``unit`` would end if placed at ``y``, drawing nothing."""
        previous = self._measuring
        self._measuring = True
        try:
            with self._surface.suppressed():
                return self._place(unit, y)
        finally:
            self._measuring = previous

    # ------------------------------------------------------------------
    # Content elements
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> float:
        """Draw plain text, or a fenced code block written inside text."""
        y = self._y
        content = "\n".join(node.lines)
        if "```" in content:
            match = _FENCED_CODE_RE.search(content)
            if match:
                language = match.group(1) or DEFAULT_CODE_LANGUAGE
                return self._render_code(match.group(2).strip(), language, y)

        text = strip_escape_markers(" ".join(node.lines))
        end = self._flow.render_runs(
            [TextRun(text=text)],
            CONTENT_X,
            y,
            CONTENT_WIDTH,
            PLAIN_TEXT_LINE_HEIGHT,
            PLAIN_TEXT_FONT_SIZE,
            self.theme.slide_text,
        )
        return end + PLAIN_TEXT_SPACING

    def visit_bullet_list(self, node: BulletList) -> float:
        """Draw a bulleted list of plain-text items."""
        items = [[TextRun(text=strip_escape_markers(item))] for item in node.items]
        return self._render_list(items, ordered=False, y=self._y)

    def visit_code_block(self, node: CodeBlock) -> float:
        """Draw a highlighted code block."""
        language = node.language or detect_language(node.filename)
        code = strip_escape_markers(node.raw).strip("\n")
        return self._render_code(code, language, self._y)

    def visit_link(self, node: Link) -> float:
        """Draw a clickable, underlined link."""
        y = self._y
        surface = self._surface
        label = strip_escape_markers(node.label or node.url)

        surface.set_font(self.options.text_font, LINK_FONT_SIZE)
        surface.set_text_color(self.theme.link)
        width = surface.string_width(label)
        surface.text(CONTENT_X, y, label, LINK_LINE_HEIGHT)
        underline_y = y + LINK_LINE_HEIGHT - 1
        surface.line(CONTENT_X, underline_y, CONTENT_X + width, underline_y, self.theme.link, LINK_UNDERLINE_WIDTH)
        surface.link(CONTENT_X, y, width, LINK_LINE_HEIGHT, node.url)
        surface.set_text_color(self.theme.slide_text)

        return y + LINK_LINE_HEIGHT + LINK_SPACING

    def visit_image(self, node: Image) -> float:
        """Draw an image scaled into the remaining space."""
        return self._render_image(node.url, self._y)

    def visit_html_fragment(self, node: HTMLFragment) -> float:
        """Draw every block of a markup fragment in source order."""
        y = self._y
        for block in split_blocks(node.html):
            y = self._render_block(block, y)
        return y

    # ------------------------------------------------------------------
    # Markup blocks
    # ------------------------------------------------------------------

    def _render_block(self, block: Block, y: float) -> float:
        if block.kind is BlockKind.PARAGRAPH:
            runs = parse_inline(block.markup.strip())
            end = self._flow.render_runs(
                runs,
                CONTENT_X,
                y,
                CONTENT_WIDTH,
                PARAGRAPH_LINE_HEIGHT,
                BODY_FONT_SIZE,
                self.theme.slide_text,
            )
            return end + PARAGRAPH_SPACING if runs else y
        if block.kind is BlockKind.LIST:
            items = [parse_inline(item.strip()) for item in block.items]
            return self._render_list(items, ordered=block.ordered, y=y)
        if block.kind is BlockKind.CODE:
            return self._render_code(block.code, block.language, y)
        if block.kind is BlockKind.BLOCKQUOTE:
            return self._render_blockquote(block, y)
        if block.kind is BlockKind.IMAGE:
            return self._render_image(block.src, y)

        end = self._flow.render_runs(
            [TextRun(text=block.markup)],
            CONTENT_X,
            y,
            CONTENT_WIDTH,
            FALLBACK_TEXT_LINE_HEIGHT,
            BODY_FONT_SIZE,
            self.theme.slide_text,
        )
        return end + FALLBACK_TEXT_SPACING if end > y else y

    def _render_list(self, items: list[list[TextRun]], ordered: bool, y: float) -> float:
        surface = self._surface
        for index, runs in enumerate(items, start=1):
            surface.set_font(self.options.text_font, BODY_FONT_SIZE)
            surface.set_text_color(self.theme.slide_text)
            bullet = f"{index}. " if ordered else LIST_BULLET
            surface.text(LIST_BULLET_X, y, bullet, LIST_LINE_HEIGHT)
            end = self._flow.render_runs(
                runs,
                LIST_TEXT_X,
                y,
                LIST_TEXT_WIDTH,
                LIST_LINE_HEIGHT,
                BODY_FONT_SIZE,
                self.theme.slide_text,
            )
            y = max(end, y + LIST_LINE_HEIGHT) + LIST_ITEM_SPACING
        return y + LIST_END_SPACING

    def _render_blockquote(self, block: Block, y: float) -> float:
        paragraphs = [parse_inline(item.strip()) for item in block.items]
        paragraphs = [runs for runs in paragraphs if runs]
        if not paragraphs:
            return y

        def flow(measure: bool) -> float:
            text_y = y + BLOCKQUOTE_PADDING
            for index, runs in enumerate(paragraphs):
                args = (runs, BLOCKQUOTE_TEXT_X, text_y, BLOCKQUOTE_TEXT_WIDTH, PARAGRAPH_LINE_HEIGHT, BODY_FONT_SIZE)
                if measure:
                    text_y = self._flow.measure_runs(*args)
                else:
                    text_y = self._flow.render_runs(*args, self.theme.slide_text)
                if index < len(paragraphs) - 1:
                    text_y += BLOCKQUOTE_PARAGRAPH_SPACING
            return text_y

        height = flow(measure=True) + BLOCKQUOTE_PADDING - y
        self._surface.fill_rect(CONTENT_X, y, CONTENT_WIDTH, height, self.theme.blockquote_background)
        self._surface.fill_rect(CONTENT_X, y, BLOCKQUOTE_BORDER_WIDTH, height, self.theme.blockquote_border)
        flow(measure=False)
        return y + height + PARAGRAPH_SPACING

    # ------------------------------------------------------------------
    # Code and images
    # ------------------------------------------------------------------

    def _render_code(self, code: str, language: str, y: float) -> float:
        """Draw code in a filled box, truncating after ``max_code_lines`` lines.

        The box holds the lines drawn plus the ellipsis row when truncated, so
        the measured end matches what is drawn.
        """
        surface = self._surface
        theme = self.theme
        max_lines = self.options.max_code_lines

        lines = highlight_lines(code, language, self.options.code_theme, theme.code_text)
        truncated = len(lines) > max_lines
        shown = min(len(lines), max_lines) + (1 if truncated else 0)
        code_height = shown * CODE_LINE_HEIGHT
        surface.fill_rect(CONTENT_X, y, CONTENT_WIDTH, code_height + CODE_BOX_PADDING, theme.code_background)

        line_y = y + CODE_TOP_PADDING
        for line in lines[:max_lines]:
            self._flow.render_code_line(line, CODE_TEXT_X, line_y, CODE_LINE_HEIGHT)
            line_y += CODE_LINE_HEIGHT

        if truncated:
            surface.set_font(self.options.code_font, CODE_FONT_SIZE)
            surface.set_text_color(theme.code_line_number)
            surface.text(CODE_TEXT_X, line_y, CODE_ELLIPSIS, CODE_LINE_HEIGHT)
            self._diagnose(
                f'code block truncated on slide {self._slide_number} "{self._slide_title}" '
                f"(max {max_lines} lines, has {len(lines)})"
            )

        surface.set_text_color(theme.slide_text)
        return y + code_height + CODE_SPACING

    def _resolve_image_path(self, src: str) -> Path:
        path = Path(src)
        return path if path.is_absolute() else self._base_dir / path

    def _render_image(self, src: str, y: float) -> float:
        """Draw an image centered in the content width, scaled to the space left."""
        path = self._resolve_image_path(src)
        where = f'slide {self._slide_number} "{self._slide_title}"'

        if not path.is_file():
            self._resource_problem(f"{where}: image not found: {path}", path)
            return y

        fmt = image_format(path)
        if fmt not in SUPPORTED_IMAGE_FORMATS:
            self._resource_problem(f'{where}: unsupported image format "{fmt}": {path}', path)
            return y

        # The spacing below the image must also fit above the bottom boundary
        max_height = CONTENT_BOTTOM - y - IMAGE_SPACING
        if max_height <= MIN_IMAGE_SPACE:
            return y

        try:
            native_width, native_height = self._surface.image_size(str(path))
        except Exception as e:
            self._resource_problem(f"{where}: failed to load image {path}: {e}", path)
            return y

        placement = fit_image(native_width, native_height, max_height)
        self._surface.image(str(path), placement.x, y, placement.width, placement.height)
        return y + placement.height + IMAGE_SPACING
