"""Per-file ingestion: front matter, header validation, rendering, and excerpt"""

import logging
from pathlib import Path

from postfeed.config import Settings
from postfeed.core.excerpt import excerpt_html
from postfeed.core.header import validate_header
from postfeed.core.models import IngestFailure, IngestResult, IngestSuccess, Post
from postfeed.core.parse import FrontmatterError, render_markdown, split_frontmatter


logger = logging.getLogger(__name__)


def ingest_text(filename: str, raw: str, settings: Settings = None) -> IngestResult:
    """Turn the raw text of one content file into a Post, or a failure with its causes.

    The slug is the filename itself. Unpublished posts still succeed; the
    assembler decides what reaches the feed.
    """
    settings = settings or Settings()
    try:
        frontmatter, body = split_frontmatter(raw)
    except FrontmatterError as e:
        return IngestFailure(slug=filename, errors=[str(e)])

    result = validate_header(frontmatter, filename)
    if not result.ok:
        return IngestFailure(slug=filename, errors=result.errors)

    content_html = render_markdown(body, settings.parser_config)
    post = Post(
        **result.header.model_dump(),
        slug=filename,
        content_html=content_html,
        excerpt_html=excerpt_html(
            content_html,
            max_length=settings.excerpt_length,
            ellipsis=settings.excerpt_ellipsis,
            marker=settings.excerpt_marker,
        ),
    )
    logger.debug("Ingested %s (published=%s)", filename, post.published)
    return IngestSuccess(slug=filename, post=post)


def ingest_file(path: Path, settings: Settings = None) -> IngestResult:
    """Read and ingest a single content file; unreadable files become failures."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return IngestFailure(slug=path.name, errors=[f"Cannot read file: {e}"])
    return ingest_text(path.name, raw, settings)
