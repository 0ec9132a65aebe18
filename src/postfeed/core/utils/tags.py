"""Tag list normalization"""

from typing import Any


def normalize_tags(value: Any) -> Any:
    """Split a comma-separated string (or clean a list) into trimmed, non-empty tags.

    Returns None when no tags remain. Non-string, non-list input is returned
    unchanged for the schema to reject.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.split(',')
    if not isinstance(value, (list, tuple)):
        return value
    tags = [t.strip() if isinstance(t, str) else t for t in value]
    tags = [t for t in tags if t != '']
    return tags or None
