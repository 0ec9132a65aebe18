"""Data models for post headers, feed records, and per-file ingest results"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from postfeed.core.utils.dates import to_datetime
from postfeed.core.utils.tags import normalize_tags


class PostHeader(BaseModel):
    """Validated front matter of a single post. Unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore")

    title:       Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(..., strict=True)
    published:   bool = Field(default=False, strict=True)
    date:        datetime = Field(..., strict=True)
    description: Optional[str] = None
    tags:        Optional[list[str]] = None
    series:      Optional[str] = None
    cover_image: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        return to_datetime(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value):
        return normalize_tags(value)


class Post(PostHeader):
    """A normalized post record as written to the feed artifact."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    slug:         str
    content_html: str = Field(..., alias="contentHtml")
    excerpt_html: str = Field(..., alias="excerptHtml")


class Feed(BaseModel):
    """Top-level shape of the feed artifact: {"posts": [...]}"""
    posts: list[Post] = []


@dataclass(frozen=True)
class IngestSuccess:
    slug: str
    post: Post
    ok = True


@dataclass(frozen=True)
class IngestFailure:
    slug: str
    errors: list[str]
    ok = False

    @property
    def reason(self) -> str:
        return "; ".join(self.errors)


IngestResult = Union[IngestSuccess, IngestFailure]


@dataclass
class FeedReport:
    """Outcome of one batch: written posts (ordered), unpublished slugs, and per-file failures."""
    posts:       list[Post] = field(default_factory=list)
    drafts:      list[str] = field(default_factory=list)
    failures:    list[IngestFailure] = field(default_factory=list)
    output_path: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def total(self) -> int:
        return len(self.posts) + len(self.drafts) + len(self.failures)
