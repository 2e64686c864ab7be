"""Read and write bird bookmark exports (a JSON array of records)."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class BookmarkFileError(ValueError):
    """Raised when an export does not contain a JSON array."""


def load_bookmarks(path: Path) -> list:
    """Load the bookmark records from a JSON export.

    Raises OSError if the file cannot be read, json.JSONDecodeError on
    invalid JSON and BookmarkFileError if the payload is not an array.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise BookmarkFileError("JSON file should contain an array of bookmarks")
    logger.debug("Loaded %d bookmarks from %s", len(data), path)
    return data


def dump_bookmarks(records: list) -> str:
    """Serialize records as pretty-printed JSON (2-space indent)."""
    return json.dumps(records, indent=2, ensure_ascii=False)
