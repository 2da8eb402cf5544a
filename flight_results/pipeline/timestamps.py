# timestamps.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

import dateparser


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a leg timestamp, returning None when it cannot be read.

    ISO 8601 strings (what the search API sends) are read directly; other
    spellings go through dateparser.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass

    return dateparser.parse(
        text,
        settings={"DATE_ORDER": "YMD", "PREFER_DAY_OF_MONTH": "first"},
    )


def to_instant(value: datetime) -> datetime:
    """Return a naive UTC datetime comparable with any other instant.

    Aware values are converted to UTC; naive values are taken as already
    expressed on the common clock.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
