"""Select bookmark records by an inclusive date range."""

import logging
from datetime import datetime

from .dates import parse_twitter_date

logger = logging.getLogger(__name__)


def filter_by_date(
    records: list,
    from_date: datetime | None = None,
    to_date: datetime | None = None,
) -> list:
    """Return records whose createdAt lies within [from_date, to_date].

    Either bound may be None. With no bounds the input list itself is
    returned. Records with an unparseable timestamp never match a bound.
    Input order is kept and records are not copied or modified.
    """
    if from_date is None and to_date is None:
        return records

    kept = []
    for record in records:
        created_at = record.get("createdAt") if isinstance(record, dict) else None
        timestamp = parse_twitter_date(created_at)
        if timestamp is None:
            logger.debug("Excluding record with unparseable date: %r", created_at)
            continue
        if from_date is not None and timestamp < from_date:
            continue
        if to_date is not None and timestamp > to_date:
            continue
        kept.append(record)

    logger.debug("Date filter kept %d of %d records", len(kept), len(records))
    return kept
