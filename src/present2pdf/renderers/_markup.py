#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/renderers/_markup.py
"""Markup subset handling for slide fragments.

Slides written in Markdown reach the renderer as small HTML fragments. Only a
fixed set of tags is understood:

- Block level: ``<p>``, ``<ul>``, ``<ol>``, ``<pre><code>``, ``<blockquote>``
  and ``<img>``
- Inline: ``<strong>``/``<b>``, ``<em>``/``<i>``, ``<code>`` and ``<a href>``

:func:`split_blocks` segments a fragment into classified blocks in source
order. :func:`parse_inline` turns the inner markup of one block into styled
:class:`TextRun` values for the flow renderer. Unknown tags are ignored.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from present2pdf.constants import DEFAULT_CODE_LANGUAGE
from present2pdf.utils.entities import decode_html_entities, strip_escape_markers, strip_html_tags

logger = logging.getLogger(__name__)

_INLINE_TOKEN_RE = re.compile(r"([^<]+)|(<[^>]+>)")
_TAG_NAME_RE = re.compile(r"^<\s*(/?)\s*([a-zA-Z][a-zA-Z0-9]*)")
_LINK_HREF_RE = re.compile(r"""(?i)<a\s[^>]*href=["']([^"']+)["'][^>]*>""")
_LANGUAGE_CLASS_PREFIX = "language-"


@dataclass(frozen=True)
class TextRun:
    """A span of decoded text with one combination of inline styles.

    Parameters
    ----------
    text : str
        Decoded text content
    bold, italic, code : bool
        Style flags
    link : str
        Link target; empty when the run is not a hyperlink

    """

    text: str
    bold: bool = False
    italic: bool = False
    code: bool = False
    link: str = ""


class InlineTag(Enum):
    """Inline tags recognized by :func:`parse_inline`."""

    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    LINK = "link"
    IGNORED = "ignored"


_INLINE_TAGS: dict[str, InlineTag] = {
    "strong": InlineTag.BOLD,
    "b": InlineTag.BOLD,
    "em": InlineTag.ITALIC,
    "i": InlineTag.ITALIC,
    "code": InlineTag.CODE,
    "a": InlineTag.LINK,
}


def classify_tag(tag: str) -> tuple[InlineTag, bool]:
    """Classify an inline tag.

    Parameters
    ----------
    tag : str
        Complete tag text such as ``<strong>`` or ``</a>``

    Returns
    -------
    tuple[InlineTag, bool]
        The tag kind and whether it is a closing tag

    """
    match = _TAG_NAME_RE.match(tag)
    if not match:
        return InlineTag.IGNORED, False
    closing, name = match.groups()
    return _INLINE_TAGS.get(name.lower(), InlineTag.IGNORED), bool(closing)


@dataclass
class _InlineState:
    bold: bool = False
    italic: bool = False
    code: bool = False
    link: str = ""

    def run(self, text: str) -> TextRun:
        return TextRun(text=text, bold=self.bold, italic=self.italic, code=self.code, link=self.link)


def parse_inline(markup: str) -> list[TextRun]:
    """Convert inline markup into an ordered list of styled runs.

    Each text segment between tags becomes one run carrying the styles that
    are active at that point. Nested tags combine; a closing tag without a
    matching opener simply clears its style.

    Parameters
    ----------
    markup : str
        Inner markup of a single block (paragraph, list item, quote)

    Returns
    -------
    list[TextRun]
        Runs in source order

    Examples
    --------
        >>> parse_inline('Visit <a href="https://go.dev">Go</a> now.')
        [TextRun(text='Visit ', ...), TextRun(text='Go', ..., link='https://go.dev'), TextRun(text=' now.', ...)]

    """
    runs: list[TextRun] = []
    state = _InlineState()

    for match in _INLINE_TOKEN_RE.finditer(markup):
        text, tag = match.groups()
        if text is not None:
            decoded = strip_escape_markers(decode_html_entities(text))
            if decoded:
                runs.append(state.run(decoded))
            continue

        kind, closing = classify_tag(tag)
        if kind is InlineTag.BOLD:
            state.bold = not closing
        elif kind is InlineTag.ITALIC:
            state.italic = not closing
        elif kind is InlineTag.CODE:
            state.code = not closing
        elif kind is InlineTag.LINK:
            if closing:
                state.link = ""
            else:
                href = _LINK_HREF_RE.match(tag)
                state.link = decode_html_entities(href.group(1)) if href else ""
        else:
            logger.debug(f"Ignoring unsupported inline tag: {tag}")

    return runs


class BlockKind(Enum):
    """Block types produced by :func:`split_blocks`."""

    PARAGRAPH = "paragraph"
    LIST = "list"
    CODE = "code"
    BLOCKQUOTE = "blockquote"
    IMAGE = "image"
    TEXT = "text"


@dataclass
class Block:
    """One classified block of a markup fragment.

    Parameters
    ----------
    kind : BlockKind
        Block type
    markup : str
        Inner markup for paragraphs; plain text for TEXT blocks
    items : list of str
        Inner markup of each list item, or of each blockquote paragraph
    ordered : bool
        True for ``<ol>`` lists
    code : str
        Code text for CODE blocks (decoded, trimmed, markers removed)
    language : str
        Language for CODE blocks
    src : str
        Image source for IMAGE blocks

    """

    kind: BlockKind
    markup: str = ""
    items: list[str] = field(default_factory=list)
    ordered: bool = False
    code: str = ""
    language: str = DEFAULT_CODE_LANGUAGE
    src: str = ""


def _code_language(code_tag) -> str:
    """Return the language named by a ``language-X`` class, or the default."""
    for css_class in code_tag.get("class") or []:
        if css_class.startswith(_LANGUAGE_CLASS_PREFIX) and len(css_class) > len(_LANGUAGE_CLASS_PREFIX):
            return css_class[len(_LANGUAGE_CLASS_PREFIX) :]
    return DEFAULT_CODE_LANGUAGE


def _only_image(tag) -> Optional[str]:
    """Return the image source when a paragraph holds nothing but one image."""
    images = tag.find_all("img")
    if len(images) != 1 or tag.get_text(strip=True):
        return None
    return images[0].get("src") or None


def _block_from_tag(tag) -> Optional[Block]:
    """Classify one top-level tag, or return None when it has no usable shape."""
    name = tag.name.lower()

    if name == "p":
        src = _only_image(tag)
        if src is not None:
            return Block(kind=BlockKind.IMAGE, src=src)
        return Block(kind=BlockKind.PARAGRAPH, markup=tag.decode_contents())

    if name in ("ul", "ol"):
        items = [li.decode_contents() for li in tag.find_all("li", recursive=False)]
        if not items:
            return None
        return Block(kind=BlockKind.LIST, items=items, ordered=name == "ol")

    if name == "pre":
        code_tag = tag.find("code")
        source = code_tag if code_tag is not None else tag
        code = strip_escape_markers(source.get_text()).strip()
        language = _code_language(code_tag) if code_tag is not None else DEFAULT_CODE_LANGUAGE
        return Block(kind=BlockKind.CODE, code=code, language=language)

    if name == "blockquote":
        # Inner paragraphs belong to the quote; they are never emitted on their own
        paragraphs = [p.decode_contents() for p in tag.find_all("p")]
        if not paragraphs:
            inner = tag.decode_contents().strip()
            paragraphs = [inner] if inner else []
        if not paragraphs:
            return None
        return Block(kind=BlockKind.BLOCKQUOTE, items=paragraphs)

    if name == "img":
        src = tag.get("src")
        return Block(kind=BlockKind.IMAGE, src=src) if src else None

    text = strip_escape_markers(tag.get_text(" ", strip=True))
    if text:
        logger.debug(f"Rendering unsupported <{name}> block as plain text")
        return Block(kind=BlockKind.TEXT, markup=text)
    return None


def split_blocks(html: str) -> list[Block]:
    """Segment a markup fragment into classified blocks.

    Blocks are returned in the order they appear in the fragment, whatever
    mix of block types it contains. Top-level elements that do not form a
    usable block are skipped. A fragment with no block structure at all
    yields a single TEXT block holding its tag-stripped text.

    Parameters
    ----------
    html : str
        Markup fragment (usually Markdown rendered to HTML)

    Returns
    -------
    list[Block]
        Classified blocks in source order

    """
    from bs4 import BeautifulSoup, NavigableString, Tag

    soup = BeautifulSoup(html, "html.parser")
    blocks: list[Block] = []

    for child in soup.children:
        if isinstance(child, Tag):
            block = _block_from_tag(child)
            if block is not None:
                blocks.append(block)
            else:
                logger.debug(f"Skipping <{child.name}> block with no usable content")
        elif type(child) is NavigableString:
            text = strip_escape_markers(str(child)).strip()
            if text:
                blocks.append(Block(kind=BlockKind.TEXT, markup=" ".join(text.split())))

    if not blocks:
        text = strip_escape_markers(strip_html_tags(html)).strip()
        if text:
            blocks.append(Block(kind=BlockKind.TEXT, markup=text))

    return blocks
