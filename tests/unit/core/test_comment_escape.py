"""Unit tests for fenced comment escaping."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from present2pdf.constants import COMMENT_ESCAPE_MARKER
from present2pdf.utils.comment_escape import (
    escape_fenced_comments,
    is_fence_line,
    is_markdown_source,
    preprocess_markdown_comments,
)

M = COMMENT_ESCAPE_MARKER


@pytest.mark.unit
class TestEscapeFencedComments:
    """Test escape_fenced_comments."""

    def test_source_without_fences_is_unchanged(self):
        source = "# Title\n\n## Section\n// comment\n# not code"
        assert escape_fenced_comments(source) == source

    def test_comment_inside_fence_gets_marker(self):
        assert escape_fenced_comments("```go\n// note\n```") == f"```go\n{M}// note\n```"

    def test_hash_prefixes_inside_fence(self):
        source = "```\n# shell comment\n## pragma\n#!/bin/sh\necho hi\n```"
        expected = f"```\n{M}# shell comment\n{M}## pragma\n{M}#!/bin/sh\necho hi\n```"
        assert escape_fenced_comments(source) == expected

    def test_section_header_outside_fence_untouched(self):
        source = "## heading\n```\n## heading\n```\n## heading"
        lines = escape_fenced_comments(source).split("\n")
        assert lines[0] == "## heading"
        assert lines[2] == f"{M}## heading"
        assert lines[4] == "## heading"

    def test_indented_comment_not_escaped(self):
        """Only column zero counts."""
        source = "```\n    // indented\n```"
        assert escape_fenced_comments(source) == source

    def test_fence_state_toggles(self):
        source = "```\n// a\n```\n// b\n```python\n# c\n```"
        lines = escape_fenced_comments(source).split("\n")
        assert lines[1] == f"{M}// a"
        assert lines[3] == "// b"
        assert lines[5] == f"{M}# c"

    @given(st.lists(st.sampled_from(["```", "```go", "// x", "# y", "## z", "code", ""]), max_size=30))
    def test_line_count_preserved(self, lines):
        source = "\n".join(lines)
        assert escape_fenced_comments(source).count("\n") == source.count("\n")

    @given(st.lists(st.sampled_from(["```", "// x", "# y", "code"]), max_size=30))
    def test_removing_markers_restores_source(self, lines):
        source = "\n".join(lines)
        assert escape_fenced_comments(source).replace(M, "") == source


@pytest.mark.unit
class TestMarkdownGate:
    """Test the markdown-only entry point."""

    def test_is_fence_line(self):
        assert is_fence_line("```")
        assert is_fence_line("```go")
        assert not is_fence_line("``` go code")
        assert not is_fence_line("text ```")

    def test_is_markdown_source(self):
        assert is_markdown_source("# Title\n")
        assert not is_markdown_source("Title\n")
        assert not is_markdown_source("#Title\n")

    def test_legacy_source_untouched(self):
        source = "Legacy Title\n\n```\n// kept as is\n```"
        assert preprocess_markdown_comments(source) == source

    def test_markdown_source_escaped(self):
        source = "# Title\n\n```\n// code\n```"
        assert preprocess_markdown_comments(source) == f"# Title\n\n```\n{M}// code\n```"
