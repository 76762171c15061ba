#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_slide_pdf_renderer.py
"""Unit tests for SlidePdfRenderer layout.

Layout is asserted on a recording surface: every drawing call is captured
with its page coordinates, so tests can check what was drawn where and what
was cut off without parsing PDF output.

"""

import datetime
import logging

import pytest
from utils import RecordingSurface, page_texts

from present2pdf.ast import BulletList, CodeBlock, Document, HTMLFragment, Image, Link, Slide, Text
from present2pdf.constants import CONTENT_BOTTOM, DEFAULT_CODE_FONT
from present2pdf.exceptions import ImageResourceError, InvalidOptionsError, RenderingError
from present2pdf.options import PdfRendererOptions, PresentParserOptions
from present2pdf.renderers.pdf import SlidePdfRenderer
from present2pdf.themes import DARK_THEME, LIGHT_THEME


def render(doc: Document, surface: RecordingSurface, **options) -> SlidePdfRenderer:
    renderer = SlidePdfRenderer(PdfRendererOptions(**options))
    renderer.render_to_surface(doc, surface)
    return renderer


def one_slide(*elements, title="Slide", base_dir=None) -> Document:
    return Document(title="Deck", slides=[Slide(title=title, elements=list(elements))], base_dir=base_dir)


@pytest.mark.unit
class TestDocumentStructure:
    """Test title slide and slide chrome."""

    def test_one_page_per_slide_plus_title(self, surface):
        doc = Document(title="Deck", slides=[Slide(title="A"), Slide(title="B")])
        render(doc, surface)
        assert len(surface.pages()) == 3

    def test_title_slide_content(self, surface):
        doc = Document(
            title="Deck",
            subtitle="Sub",
            date=datetime.date(2006, 1, 2),
            authors=[],
        )
        render(doc, surface)
        texts = page_texts(surface.pages()[0])
        # Bold title is drawn twice
        assert texts.count("Deck") == 2
        assert "Sub" in texts
        assert "January 2, 2006" in texts

    def test_title_slide_background(self, surface):
        render(Document(title="Deck"), surface, theme="dark")
        first_fill = surface.of_kind("fill_rect")[0]
        assert first_fill[1:] == (0.0, 0.0, 297.0, 210.0, DARK_THEME.title_background)

    def test_slide_title_and_rule(self, surface):
        render(one_slide(title="Intro"), surface)
        page = surface.pages()[1]
        assert page[0][5] == LIGHT_THEME.slide_background
        assert "Intro" in page_texts(page)
        rule = [call for call in page if call[0] == "line"][0]
        assert rule[1:5] == (20.0, 36.0, 277.0, 36.0)

    def test_escape_markers_not_drawn(self, surface):
        render(one_slide(Text(lines=["\u200c// kept"])), surface)
        assert "//" in surface.texts()
        assert not any("\u200c" in text for text in surface.texts())


@pytest.mark.unit
class TestOverflow:
    """Content past the bottom boundary is dropped with one diagnostic."""

    def test_text_elements_cut_off(self, surface):
        # Each one-line Text advances 15 mm from y=45: nine end by y=180, the tenth would end at 195
        elements = [Text(lines=[f"w{i}"]) for i in range(1, 13)]
        renderer = render(one_slide(*elements, title="Big"), surface)

        texts = surface.texts()
        assert "w9" in texts
        assert "w10" not in texts
        assert renderer.diagnostics == ['slide 1 "Big" does not fit - content overflow (y=195), some elements cut off']

    def test_fragment_blocks_cut_individually(self, surface):
        html = "".join(f"<p>p{i}</p>" for i in range(1, 13))
        renderer = render(one_slide(HTMLFragment(html=html)), surface)

        texts = surface.texts()
        # Paragraphs advance 16 mm: the ninth ends at 189
        assert "p9" in texts
        assert "p10" not in texts
        assert len(renderer.diagnostics) == 1

    def test_diagnostic_logged_as_warning(self, surface, caplog):
        elements = [Text(lines=["x"]) for _ in range(12)]
        with caplog.at_level(logging.WARNING, logger="present2pdf.renderers.pdf"):
            render(one_slide(*elements), surface)
        assert [record.message for record in caplog.records if "does not fit" in record.message]

    def test_quiet_suppresses_logging(self, surface, caplog):
        elements = [Text(lines=["x"]) for _ in range(12)]
        with caplog.at_level(logging.WARNING, logger="present2pdf.renderers.pdf"):
            renderer = render(one_slide(*elements), surface, quiet=True)
        assert len(renderer.diagnostics) == 1
        assert not [record for record in caplog.records if record.name == "present2pdf.renderers.pdf"]

    def test_fitting_slide_has_no_diagnostics(self, surface):
        renderer = render(one_slide(Text(lines=["short"])), surface)
        assert renderer.diagnostics == []

    def test_slides_are_numbered_from_one(self, surface):
        full = [Text(lines=["x"]) for _ in range(12)]
        doc = Document(title="Deck", slides=[Slide(title="A"), Slide(title="B", elements=full)])
        renderer = render(doc, surface)
        assert renderer.diagnostics[0].startswith('slide 2 "B"')

    def test_diagnostic_title_without_escape_marker(self, surface):
        elements = [Text(lines=["x"]) for _ in range(12)]
        renderer = render(one_slide(*elements, title="\u200cCrowded"), surface)
        assert renderer.diagnostics == [
            'slide 1 "Crowded" does not fit - content overflow (y=195), some elements cut off'
        ]


@pytest.mark.unit
class TestContentElements:
    """Test placement of each element kind."""

    def test_markup_blocks_in_source_order(self, surface):
        render(one_slide(HTMLFragment(html="<p>Intro</p>\n<ul>\n<li>One</li>\n</ul>")), surface)
        baselines = {call[3]: call[2] for call in surface.of_kind("text")}
        assert baselines["Intro"] < baselines["One"]

    def test_ordered_list_numbers(self, surface):
        render(one_slide(HTMLFragment(html="<ol><li>a</li><li>b</li></ol>")), surface)
        texts = surface.texts()
        assert "1. " in texts
        assert "2. " in texts

    def test_bullet_list_items(self, surface):
        render(one_slide(BulletList(items=["first", "second"])), surface)
        bullets = [call for call in surface.of_kind("text") if call[3] == "• "]
        assert len(bullets) == 2
        assert all(call[1] == 25.0 for call in bullets)

    def test_link_label_and_area(self, surface):
        render(one_slide(Link(url="https://go.dev", label="The Go site")), surface)
        assert "The Go site" in surface.texts()
        assert surface.of_kind("link")[0][5] == "https://go.dev"

    def test_link_without_label_shows_url(self, surface):
        render(one_slide(Link(url="https://go.dev")), surface)
        assert "https://go.dev" in surface.texts()

    def test_blockquote_box(self, surface):
        render(one_slide(HTMLFragment(html="<blockquote><p>wise words</p></blockquote>")), surface)
        fills = [call for call in surface.pages()[1] if call[0] == "fill_rect"]
        colors = [call[5] for call in fills]
        assert LIGHT_THEME.blockquote_background in colors
        border = next(call for call in fills if call[5] == LIGHT_THEME.blockquote_border)
        assert border[3] == 4.0

    def test_text_with_fence_renders_as_code(self, surface):
        render(one_slide(Text(lines=["```python", "print('hi')", "```"])), surface)
        fills = [call for call in surface.pages()[1] if call[0] == "fill_rect"]
        assert any(call[5] == LIGHT_THEME.code_background for call in fills)
        assert "```python" not in surface.texts()


@pytest.mark.unit
class TestCodeBlocks:
    """Test code box geometry and truncation."""

    def test_box_geometry(self, surface):
        render(one_slide(CodeBlock(raw="a := 1\nb := 2\nc := 3", filename="x.go")), surface)
        box = next(call for call in surface.of_kind("fill_rect") if call[5] == LIGHT_THEME.code_background)
        assert box[1:5] == (20.0, 45.0, 257.0, 3 * 6.0 + 5)

    def test_truncated_with_diagnostic(self, surface):
        code = "\n".join(f"v{i} := {i}" for i in range(25))
        renderer = render(one_slide(CodeBlock(raw=code), title="Code"), surface)

        assert "..." in surface.texts()
        assert renderer.diagnostics == ['code block truncated on slide 1 "Code" (max 20 lines, has 25)']
        box = next(call for call in surface.of_kind("fill_rect") if call[5] == LIGHT_THEME.code_background)
        # Twenty lines plus the ellipsis row
        assert box[4] == 21 * 6.0 + 5

    def test_max_code_lines_option(self, surface):
        renderer = render(one_slide(CodeBlock(raw="a\nb\nc\nd")), surface, max_code_lines=2)
        assert "(max 2 lines, has 4)" in renderer.diagnostics[0]

    def test_following_element_below_code(self, surface):
        render(one_slide(CodeBlock(raw="x := 1"), Text(lines=["after"])), surface)
        after = next(call for call in surface.of_kind("text") if call[3] == "after")
        # One code row advances 6 + 12 from y=45; text cell top at 63
        assert after[2] > 63

    @pytest.mark.parametrize("line_count,max_lines", [(22, 25), (30, 21), (25, 20)])
    def test_code_stays_inside_box(self, surface, line_count, max_lines):
        code = "\n".join(f"v{i} := {i}" for i in range(line_count))
        renderer = render(one_slide(CodeBlock(raw=code)), surface, max_code_lines=max_lines)

        box = next(call for call in surface.of_kind("fill_rect") if call[5] == LIGHT_THEME.code_background)
        box_top, box_bottom = box[2], box[2] + box[4]
        baselines = sorted({call[2] for call in surface.of_kind("text") if call[4] == DEFAULT_CODE_FONT})
        # Every shown line plus the ellipsis row when truncated
        assert len(baselines) == min(line_count, max_lines) + (1 if line_count > max_lines else 0)
        assert box_top < baselines[0]
        assert baselines[-1] < box_bottom <= CONTENT_BOTTOM
        assert not any("does not fit" in message for message in renderer.diagnostics)

    def test_tall_code_block_overflows(self, surface):
        code = "\n".join(f"v{i} := {i}" for i in range(30))
        renderer = render(
            one_slide(CodeBlock(raw=code), Text(lines=["after"]), title="Long"), surface, max_code_lines=30
        )

        assert renderer.diagnostics == ['slide 1 "Long" does not fit - content overflow (y=237), some elements cut off']
        assert not any(call[4] == DEFAULT_CODE_FONT for call in surface.of_kind("text"))
        assert "after" not in surface.texts()

    def test_lexer_failure_draws_plain_code(self, surface, monkeypatch):
        class BrokenLexer:
            def get_tokens(self, code):
                raise RuntimeError("boom")

        monkeypatch.setattr("present2pdf.renderers._highlight.get_lexer", lambda language: BrokenLexer())
        render(one_slide(CodeBlock(raw="a\tb\nc")), surface)

        box = next(call for call in surface.of_kind("fill_rect") if call[5] == LIGHT_THEME.code_background)
        assert box[4] == 2 * 6.0 + 5
        code_calls = [call for call in surface.of_kind("text") if call[4] == DEFAULT_CODE_FONT]
        assert [call[3] for call in code_calls] == ["a   b", "c"]
        assert all(call[6] == LIGHT_THEME.code_text for call in code_calls)


@pytest.mark.unit
class TestImages:
    """Test image placement and resource diagnostics."""

    def test_image_scaled_and_placed(self, surface, png_file):
        surface.images[str(png_file)] = (100.0, 50.0)
        render(one_slide(Image(url=png_file.name), base_dir=str(png_file.parent)), surface)
        _, path, x, y, w, h = surface.of_kind("image")[0]
        assert path == str(png_file)
        assert (x, y) == (pytest.approx(20.0), pytest.approx(45.0))
        assert w == pytest.approx(257.0)
        assert h == pytest.approx(128.5)

    def test_image_never_crosses_bottom(self, surface, png_file):
        surface.images[str(png_file)] = (10.0, 1000.0)
        renderer = render(one_slide(Image(url=str(png_file))), surface)
        _, _, _, y, _, h = surface.of_kind("image")[0]
        assert y + h <= 190.0
        assert renderer.diagnostics == []

    def test_markup_image(self, surface, png_file):
        surface.images[str(png_file)] = (40.0, 40.0)
        html = f'<p><img src="{png_file.name}" alt="pixel" /></p>'
        render(one_slide(HTMLFragment(html=html), base_dir=str(png_file.parent)), surface)
        assert len(surface.of_kind("image")) == 1

    def test_missing_image(self, surface, temp_dir):
        renderer = render(one_slide(Image(url="missing.png"), title="Pics", base_dir=str(temp_dir)), surface)
        assert surface.of_kind("image") == []
        assert len(renderer.diagnostics) == 1
        assert renderer.diagnostics[0].startswith('slide 1 "Pics": image not found:')

    def test_unsupported_format(self, surface, temp_dir):
        (temp_dir / "pic.bmp").write_bytes(b"BM")
        renderer = render(one_slide(Image(url="pic.bmp"), base_dir=str(temp_dir)), surface)
        assert 'unsupported image format "BMP"' in renderer.diagnostics[0]

    def test_unreadable_image(self, surface, temp_dir):
        (temp_dir / "broken.png").write_bytes(b"not a png")
        renderer = render(one_slide(Image(url="broken.png"), base_dir=str(temp_dir)), surface)
        assert "failed to load image" in renderer.diagnostics[0]

    def test_fail_on_resource_errors(self, surface, temp_dir):
        with pytest.raises(RenderingError, match="image not found") as exc_info:
            render(
                one_slide(Image(url="missing.png"), base_dir=str(temp_dir)),
                surface,
                fail_on_resource_errors=True,
            )
        assert isinstance(exc_info.value, ImageResourceError)
        assert exc_info.value.slide_number == 1
        assert exc_info.value.image_path.endswith("missing.png")


@pytest.mark.unit
class TestRendererOptions:
    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            SlidePdfRenderer(PresentParserOptions())

    def test_diagnostics_reset_between_renders(self, surface):
        renderer = SlidePdfRenderer()
        renderer.render_to_surface(one_slide(*[Text(lines=["x"]) for _ in range(12)]), surface)
        renderer.render_to_surface(one_slide(Text(lines=["x"])), RecordingSurface())
        assert renderer.diagnostics == []
