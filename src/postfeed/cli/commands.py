"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from postfeed.config import Settings, load_config
from postfeed.core.errors import PostfeedError
from postfeed.core.feed import assemble_feed, check_content
from postfeed.core.models import FeedReport
from postfeed.core.reader import FeedReader, load_feed


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("postfeed").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _echo_report(report: FeedReport) -> None:
    """Print one line per published post and per failure, then a summary line."""
    for post in report.posts:
        typer.echo(f"✅ {post.slug}")
    for slug in report.drafts:
        typer.echo(f"  unpublished: {slug}")
    for failure in report.failures:
        typer.echo(f"❌ {failure.slug}: {failure.reason}", err=True)
    typer.echo(
        f"{len(report.posts)} published, "
        f"{len(report.drafts)} unpublished, "
        f"{len(report.failures)} failed"
    )


def _reader(feed: Optional[str]) -> FeedReader:
    settings = _settings(overrides={"output_path": feed})
    try:
        return load_feed(Path(settings.output_path))
    except PostfeedError as e:
        _fail(str(e))


def build_cmd(
    content_dir: Annotated[Optional[str], typer.Argument(help="Directory of markdown posts")] = None,
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Feed JSON output path")] = None,
    workers: Annotated[Optional[int], typer.Option("--workers", help="Ingestion threads")] = None,
    excerpt: Annotated[Optional[int], typer.Option("--excerpt-length", help="Max excerpt characters")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    strict: Annotated[bool, typer.Option("--strict", help="Exit 1 if any post fails to ingest")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log each pipeline step")] = False,
    ):
    """Ingest all posts and write the JSON feed."""
    _configure_logging(verbose)
    settings = _settings(overrides={
        "content_dir": content_dir, "output_path": out, "max_workers": workers,
        "excerpt_length": excerpt, "parser_config": parser,
    })
    try:
        report = assemble_feed(Path(settings.content_dir), Path(settings.output_path), settings)
    except PostfeedError as e:
        _fail("Build failed", e)
    _echo_report(report)
    typer.echo(f"Wrote feed to {report.output_path}")
    if strict and not report.ok:
        raise typer.Exit(1)


def check_cmd(
    content_dir: Annotated[Optional[str], typer.Argument(help="Directory of markdown posts")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log each pipeline step")] = False,
    ):
    """Ingest all posts and report problems without writing the feed."""
    _configure_logging(verbose)
    settings = _settings(overrides={"content_dir": content_dir})
    try:
        report = check_content(Path(settings.content_dir), settings)
    except PostfeedError as e:
        _fail("Check failed", e)
    _echo_report(report)
    if not report.ok:
        raise typer.Exit(1)


def list_cmd(
    feed: Annotated[Optional[str], typer.Option("--feed", help="Feed JSON path")] = None,
    ):
    """List posts in the feed, newest first."""
    reader = _reader(feed)
    if not len(reader):
        typer.echo("No posts in feed.")
        return
    for post in reader.posts:
        typer.echo(f"{post.date.date().isoformat()}  {post.slug}  {post.title}")


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Post slug (source filename)")],
    feed: Annotated[Optional[str], typer.Option("--feed", help="Feed JSON path")] = None,
    html: Annotated[bool, typer.Option("--html", help="Print the full body HTML instead of the excerpt")] = False,
    ):
    """Show one published post by slug."""
    post = _reader(feed).get_by_slug(slug)
    if post is None:
        _fail(f"No published post with slug '{slug}'")

    typer.echo(f"title: {post.title}")
    typer.echo(f"date: {post.date.isoformat()}")
    for name in ("description", "series", "cover_image"):
        value = getattr(post, name)
        if value:
            typer.echo(f"{name}: {value}")
    if post.tags:
        typer.echo(f"tags: {', '.join(post.tags)}")
    typer.echo("")
    typer.echo(post.content_html if html else post.excerpt_html)
