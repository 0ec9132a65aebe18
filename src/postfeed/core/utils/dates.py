"""Date coercion for front matter values and filename prefixes"""

import re
from datetime import date, datetime, time, timezone
from typing import Any, Optional


DATE_PREFIX_RE = re.compile(r'^(\d{4}-\d{2}-\d{2})')


def to_datetime(value: Any) -> Any:
    """Normalize a date, datetime or ISO string to a naive UTC datetime.

    Values that cannot be converted are returned unchanged so schema
    validation can reject them with a proper message.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return to_datetime(datetime.fromisoformat(value.strip().replace('Z', '+00:00')))
        except ValueError:
            return value
    return value


def date_from_filename(filename: str) -> Optional[datetime]:
    """Return the leading YYYY-MM-DD of filename as a datetime, else None."""
    m = DATE_PREFIX_RE.match(filename)
    if not m:
        return None
    try:
        return datetime.strptime(m.group(1), '%Y-%m-%d')
    except ValueError:
        return None
