"""Front matter schema validation with a tagged result instead of exceptions"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError

from postfeed.core.models import PostHeader
from postfeed.core.utils.dates import date_from_filename


NO_DATE_MSG = "date: no date field and filename has no YYYY-MM-DD prefix"


@dataclass(frozen=True)
class HeaderResult:
    """Either a validated header or the list of validation messages."""
    header: Optional[PostHeader] = None
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.header is not None


def _messages(exc: ValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into 'field: message' strings."""
    out = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "header"
        out.append(f"{loc}: {err['msg']}")
    return out


def validate_header(raw: dict[str, Any], filename: str) -> HeaderResult:
    """Validate raw front matter for the file named filename.

    A missing or null 'published' means unpublished. A missing 'date' falls
    back to the filename's YYYY-MM-DD prefix; with neither, validation fails.
    """
    data = {str(k): v for k, v in raw.items()}
    if data.get("published") is None:
        data.pop("published", None)

    errors: list[str] = []
    if data.get("date") is None:
        fallback = date_from_filename(filename)
        if fallback is None:
            errors.append(NO_DATE_MSG)
            data.pop("date", None)
        else:
            data["date"] = fallback

    try:
        header = PostHeader.model_validate(data)
    except ValidationError as e:
        # the missing-date case is already reported above
        messages = [m for m in _messages(e) if not (errors and m.startswith("date:"))]
        return HeaderResult(errors=errors + messages)
    return HeaderResult(header=header)
