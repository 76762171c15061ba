"""Unit tests for themes and option classes."""

import dataclasses

import pytest

from present2pdf.exceptions import ValidationError
from present2pdf.options import PdfRendererOptions, PresentParserOptions
from present2pdf.themes import DARK_THEME, LIGHT_THEME, get_available_code_styles, get_available_themes, get_theme


@pytest.mark.unit
class TestThemes:
    def test_default_is_light(self):
        assert get_theme() is LIGHT_THEME
        assert get_theme(None) is LIGHT_THEME

    def test_lookup_is_case_insensitive(self):
        assert get_theme("Dark") is DARK_THEME

    def test_unknown_theme(self):
        with pytest.raises(ValidationError) as exc_info:
            get_theme("sepia")
        assert exc_info.value.parameter_name == "theme"

    def test_available(self):
        assert get_available_themes() == ["dark", "light"]
        assert "monokai" in get_available_code_styles()

    def test_colors_are_rgb_triples(self):
        for theme in (LIGHT_THEME, DARK_THEME):
            for f in dataclasses.fields(theme):
                if f.name == "name":
                    continue
                color = getattr(theme, f.name)
                assert len(color) == 3
                assert all(0 <= channel <= 255 for channel in color)

    def test_themes_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            LIGHT_THEME.link = (0, 0, 0)


@pytest.mark.unit
class TestRendererOptions:
    def test_defaults(self):
        options = PdfRendererOptions()
        assert options.theme == "light"
        assert options.code_theme == "monokai"
        assert options.max_code_lines == 20
        assert options.quiet is False
        assert options.fail_on_resource_errors is False

    def test_create_updated(self):
        options = PdfRendererOptions()
        updated = options.create_updated(theme="dark", quiet=True)
        assert updated.theme == "dark"
        assert updated.quiet is True
        assert options.theme == "light"

    def test_invalid_theme(self):
        with pytest.raises(ValueError):
            PdfRendererOptions(theme="sepia")

    @pytest.mark.parametrize("value", [0, -3])
    def test_invalid_max_code_lines(self, value):
        with pytest.raises(ValueError):
            PdfRendererOptions(max_code_lines=value)

    def test_fields_have_help(self):
        for f in dataclasses.fields(PdfRendererOptions):
            assert f.metadata.get("help"), f.name


@pytest.mark.unit
class TestParserOptions:
    def test_defaults(self):
        options = PresentParserOptions()
        assert options.escape_code_comments is True
        assert options.base_dir is None

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            PresentParserOptions().base_dir = "x"
