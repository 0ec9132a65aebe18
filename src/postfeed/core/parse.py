"""File discovery, front matter splitting, and markdown-it rendering"""

import re
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt

from postfeed.core.errors import ContentDirError


FRONTMATTER_RE = re.compile(r'^---[ \t]*\r?\n(?:(.*?)\r?\n)??---[ \t]*(?:\r?\n|$)', re.DOTALL)


class FrontmatterError(ValueError):
    """The leading YAML block is unterminated, unparsable, or not a mapping."""


def make_parser(preset: str = 'gfm-like') -> MarkdownIt:
    """Build a MarkdownIt instance that passes raw HTML through untouched."""
    return MarkdownIt(preset, options_update={"linkify": False, "html": True})


def render_markdown(body: str, preset: str = 'gfm-like') -> str:
    return make_parser(preset).render(body)


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body). A file without a leading '---' has an empty header."""
    text = text.lstrip('\ufeff')
    if not text.startswith('---'):
        return {}, text
    m = FRONTMATTER_RE.match(text)
    if not m:
        raise FrontmatterError("Unterminated front matter block")
    try:
        fm = yaml.safe_load(m.group(1) or '') or {}
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML front matter: {e}") from e
    if not isinstance(fm, dict):
        raise FrontmatterError(f"Invalid YAML front matter: expected a mapping, got {type(fm).__name__}")
    return fm, text[m.end():]


def discover_files(content_dir: Path, extension: str = '.md') -> list[Path]:
    """Return content files directly under content_dir, sorted by name.

    Sorting fixes the scan order that breaks date ties in the feed.
    """
    if not content_dir.is_dir():
        raise ContentDirError(f"Content directory not found: {content_dir}")
    try:
        entries = list(content_dir.iterdir())
    except OSError as e:
        raise ContentDirError(f"Cannot read content directory {content_dir}: {e}") from e
    return sorted(p for p in entries if p.is_file() and p.suffix == extension)
