"""Fatal pipeline errors; per-file problems are reported as IngestFailure values instead"""


class PostfeedError(Exception):
    """Base class for errors that abort a build."""


class ContentDirError(PostfeedError):
    """The content directory is missing or cannot be listed."""


class FeedWriteError(PostfeedError):
    """The feed artifact could not be written."""


class FeedReadError(PostfeedError):
    """The feed artifact is missing or does not match the Feed schema."""
