"""Date parsing for bookmark timestamps and user-supplied date bounds.

Bookmark timestamps come from the export in Twitter's format and are
timezone-aware. User dates (``--from``/``--to``) are calendar days in the
local timezone.
"""

import logging
import re
from datetime import datetime

logger = logging.getLogger(__name__)

# Twitter's date format: "Tue Jan 20 16:01:16 +0000 2026"
TWITTER_DATE_FORMAT = "%a %b %d %H:%M:%S %z %Y"

# Date-only variant seen in hand-edited exports, e.g. "Tue Jan 20 2026"
FALLBACK_DATE_FORMATS = ("%a %b %d %Y",)

UNKNOWN_DATE = "Unknown date"

# Fixed English names so output does not depend on the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_USER_DATE_RE = re.compile(r"^(\d+)-(\d+)-(\d+)$")


class InvalidDateFormat(ValueError):
    """Raised when a user date is not in YYYY-MM-DD format."""


def _localize(dt: datetime) -> datetime:
    """Attach the local timezone to naive datetimes."""
    return dt.astimezone() if dt.tzinfo is None else dt


def parse_twitter_date(text: object) -> datetime | None:
    """Parse a bookmark timestamp.

    Returns a timezone-aware datetime, or None when the value is missing or
    in no recognized format. None never satisfies a date bound.
    """
    if not isinstance(text, str) or not text.strip():
        return None
    text = text.strip()

    try:
        return datetime.strptime(text, TWITTER_DATE_FORMAT)
    except ValueError:
        pass

    # Localizing values near datetime.min/max can overflow
    try:
        return _localize(datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        pass

    for fmt in FALLBACK_DATE_FORMATS:
        try:
            return _localize(datetime.strptime(text, fmt))
        except (ValueError, OverflowError):
            continue

    logger.debug("Unrecognized timestamp: %r", text)
    return None


def parse_user_date(text: str, end_of_day: bool = False) -> datetime:
    """Parse a YYYY-MM-DD date as local midnight.

    With ``end_of_day`` the result is the last millisecond of that day
    instead, so an upper bound covers the whole calendar day.
    """
    match = _USER_DATE_RE.match(text.strip()) if isinstance(text, str) else None
    if not match:
        raise InvalidDateFormat(f"Invalid date {text!r}: expected YYYY-MM-DD")

    year, month, day = (int(part) for part in match.groups())
    try:
        if end_of_day:
            naive = datetime(year, month, day, 23, 59, 59, 999000)
        else:
            naive = datetime(year, month, day)
        return naive.astimezone()
    except (ValueError, OverflowError) as e:
        raise InvalidDateFormat(f"Invalid date {text!r}: {e}") from e


def format_display_date(text: object) -> str:
    """Render a bookmark timestamp as e.g. "January 20, 2026 at 04:01 PM"."""
    parsed = parse_twitter_date(text)
    if parsed is None:
        return UNKNOWN_DATE

    try:
        local = parsed.astimezone()
    except (ValueError, OverflowError):
        logger.debug("Timestamp out of displayable range: %r", text)
        return UNKNOWN_DATE

    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{MONTH_NAMES[local.month - 1]} {local.day}, {local.year} "
        f"at {hour:02d}:{local.minute:02d} {meridiem}"
    )
