"""Feed assembly: ingest a content directory, keep published posts, sort, and write JSON"""

import json
import logging
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from postfeed.config import Settings
from postfeed.core.errors import FeedWriteError
from postfeed.core.ingest import ingest_file
from postfeed.core.models import Feed, FeedReport, IngestResult, Post
from postfeed.core.parse import discover_files


logger = logging.getLogger(__name__)


def ingest_all(files: list[Path], settings: Settings) -> list[IngestResult]:
    """Ingest files independently; results come back in the order of files."""
    if settings.max_workers > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=settings.max_workers) as pool:
            return list(pool.map(lambda p: ingest_file(p, settings), files))
    return [ingest_file(p, settings) for p in files]


def collect(results: list[IngestResult]) -> FeedReport:
    """Split results into published posts (newest first), draft slugs, and failures.

    The sort is stable, so posts sharing a date keep their scan order.
    """
    report = FeedReport()
    published: list[Post] = []
    for result in results:
        if not result.ok:
            logger.warning("Skipped %s: %s", result.slug, result.reason)
            report.failures.append(result)
        elif result.post.published:
            logger.info("Published %s", result.slug)
            published.append(result.post)
        else:
            logger.info("Unpublished %s", result.slug)
            report.drafts.append(result.slug)
    report.posts = sorted(published, key=lambda p: p.date, reverse=True)
    return report


def render_feed(posts: list[Post], indent: int = 2) -> str:
    """Serialize posts as the feed JSON document; identical input gives identical text."""
    payload = Feed(posts=posts).model_dump(mode="json", by_alias=True)
    return json.dumps(payload, indent=indent or None, ensure_ascii=False) + "\n"


def write_feed(posts: list[Post], output_path: Path, indent: int = 2) -> Path:
    """Replace output_path with the rendered feed in one atomic step.

    The JSON is written to a temp file beside the target and renamed over it,
    so a failed write leaves any previous artifact intact.
    """
    text = render_feed(posts, indent)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.chmod(tmp, 0o644)
            os.replace(tmp, output_path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
    except OSError as e:
        raise FeedWriteError(f"Cannot write feed to {output_path}: {e}") from e
    return output_path


def check_content(content_dir: Path, settings: Settings = None) -> FeedReport:
    """Ingest content_dir and build the report without writing anything."""
    settings = settings or Settings()
    files = discover_files(Path(content_dir), settings.content_extension)
    logger.debug("Found %d content file(s) in %s", len(files), content_dir)
    return collect(ingest_all(files, settings))


def assemble_feed(content_dir: Path, output_path: Path, settings: Settings = None) -> FeedReport:
    """Build the feed artifact from content_dir.

    Per-file failures are reported, not raised. ContentDirError and
    FeedWriteError abort the build.
    """
    settings = settings or Settings()
    report = check_content(content_dir, settings)
    report.output_path = write_feed(report.posts, Path(output_path), settings.json_indent)
    logger.info("Wrote %d post(s) to %s", len(report.posts), report.output_path)
    return report
