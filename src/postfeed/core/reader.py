"""Read accessor over the feed artifact for index and detail views"""

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from postfeed.core.errors import FeedReadError
from postfeed.core.models import Feed, Post


class FeedReader:
    """Ordered posts plus slug lookup over a loaded Feed."""

    def __init__(self, feed: Feed):
        self._feed = feed
        self._by_slug = {p.slug: p for p in feed.posts}

    @property
    def posts(self) -> list[Post]:
        return list(self._feed.posts)

    def get_by_slug(self, slug: str) -> Optional[Post]:
        """Return the post with this slug, or None for unpublished or unknown slugs."""
        return self._by_slug.get(slug)

    def __len__(self) -> int:
        return len(self._feed.posts)


def load_feed(path: Path) -> FeedReader:
    """Load and validate a feed artifact written by assemble_feed."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise FeedReadError(f"Cannot read feed {path}: {e}") from e
    try:
        feed = Feed.model_validate_json(text)
    except ValidationError as e:
        raise FeedReadError(f"Invalid feed {path}: {e}") from e
    return FeedReader(feed)
