"""Unit tests for core/parse.py"""

import pytest

from postfeed.core.errors import ContentDirError
from postfeed.core.parse import (
    FrontmatterError,
    discover_files,
    make_parser,
    render_markdown,
    split_frontmatter,
)


def test_split_frontmatter_with_yaml():
    """split_frontmatter extracts the YAML header and returns the body."""
    fm, body = split_frontmatter("---\ntitle: Hello\n---\n# Body\n")
    assert fm == {"title": "Hello"}
    assert body == "# Body\n"


def test_split_frontmatter_no_frontmatter():
    """Text without a leading delimiter has an empty header and is returned whole."""
    text = "# No frontmatter\n"
    assert split_frontmatter(text) == ({}, text)


def test_split_frontmatter_crlf_and_bom():
    fm, body = split_frontmatter("\ufeff---\r\ntitle: Hi\r\n---\r\nBody\r\n")
    assert fm == {"title": "Hi"}
    assert body == "Body\r\n"


def test_split_frontmatter_unterminated():
    with pytest.raises(FrontmatterError, match="Unterminated"):
        split_frontmatter("---\ntitle: Hello\n# Body\n")


def test_split_frontmatter_invalid_yaml():
    with pytest.raises(FrontmatterError, match="Invalid YAML"):
        split_frontmatter("---\ntitle: [unclosed\n---\nBody\n")


def test_split_frontmatter_non_mapping():
    with pytest.raises(FrontmatterError, match="expected a mapping"):
        split_frontmatter("---\n- a\n- b\n---\nBody\n")


def test_frontmatter_error_is_value_error():
    assert issubclass(FrontmatterError, ValueError)


def test_render_markdown_basic():
    assert render_markdown("# Hello\n\nWorld.\n") == "<h1>Hello</h1>\n<p>World.</p>\n"


def test_render_markdown_passes_raw_html_through():
    """Embedded HTML is neither escaped nor stripped."""
    html = render_markdown('<div class="note">hi</div>\n\nText with <span>inline</span>.\n')
    assert '<div class="note">hi</div>' in html
    assert "<span>inline</span>" in html


def test_render_markdown_gfm_table():
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<table>" in html


def test_make_parser_unknown_preset():
    with pytest.raises(KeyError):
        make_parser("no-such-preset")


def test_discover_files_filters_and_sorts(tmp_path):
    """discover_files keeps matching files only, sorted by name, without recursing."""
    (tmp_path / "b.md").write_text("b")
    (tmp_path / "a.md").write_text("a")
    (tmp_path / "notes.txt").write_text("text")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.md").write_text("c")
    assert discover_files(tmp_path) == [tmp_path / "a.md", tmp_path / "b.md"]


def test_discover_files_custom_extension(tmp_path):
    (tmp_path / "a.md").write_text("a")
    (tmp_path / "b.markdown").write_text("b")
    assert discover_files(tmp_path, ".markdown") == [tmp_path / "b.markdown"]


def test_discover_files_missing_dir(tmp_path):
    with pytest.raises(ContentDirError, match="not found"):
        discover_files(tmp_path / "missing")


def test_split_frontmatter_empty_block():
    """An empty header block parses to an empty mapping, not an unterminated block."""
    assert split_frontmatter("---\n---\nBody\n") == ({}, "Body\n")


def test_split_frontmatter_empty_block_ignores_later_rules():
    fm, body = split_frontmatter("---\n---\nIntro\n\n---\n\nMore\n")
    assert fm == {}
    assert body == "Intro\n\n---\n\nMore\n"
