"""Option defaults and resolution for the command-line tools.

Both tools are configured only through their arguments; there is no config
file and no environment variable lookup.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path

from .dates import InvalidDateFormat, parse_user_date

DEFAULT_INPUT_FILE = Path("bookmarks.json")


@dataclass
class DateRange:
    from_date: datetime | None = None
    to_date: datetime | None = None

    @property
    def is_bounded(self) -> bool:
        return self.from_date is not None or self.to_date is not None


def resolve_date_range(from_text: str | None, to_text: str | None) -> DateRange:
    """Turn --from/--to values into an inclusive DateRange.

    The upper bound covers the whole of its calendar day. Raises
    InvalidDateFormat naming the offending flag if either value is not
    YYYY-MM-DD.
    """
    return DateRange(
        from_date=_parse_bound("--from", from_text, end_of_day=False),
        to_date=_parse_bound("--to", to_text, end_of_day=True),
    )


def _parse_bound(flag: str, text: str | None, end_of_day: bool) -> datetime | None:
    if text is None:
        return None
    try:
        return parse_user_date(text, end_of_day=end_of_day)
    except InvalidDateFormat as e:
        raise InvalidDateFormat(
            f"{flag} must be in YYYY-MM-DD format (got {text!r})"
        ) from e


def default_output_file(today: date | None = None) -> Path:
    """Date-stamped markdown filename, e.g. bookmarks-2026-01-20.md."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return Path(f"bookmarks-{today.isoformat()}.md")
