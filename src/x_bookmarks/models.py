"""Typed views over bookmark records from a bird JSON export.

The export is loosely shaped, so every field is optional and falls back to
a fixed default. The raw dicts are never modified.
"""

from dataclasses import dataclass
from typing import Any

UNKNOWN_NAME = "Unknown"
UNKNOWN_USERNAME = "unknown"


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _count(value: Any) -> int:
    # null and missing both mean 0; an explicit 0 stays 0
    return 0 if value is None else value


@dataclass
class Author:
    name: str = UNKNOWN_NAME
    username: str = UNKNOWN_USERNAME  # handle without @

    @classmethod
    def from_dict(cls, data: Any) -> "Author":
        data = _as_dict(data)
        return cls(
            name=data.get("name") or UNKNOWN_NAME,
            username=data.get("username") or UNKNOWN_USERNAME,
        )


@dataclass
class Bookmark:
    tweet_id: str
    author: Author
    text: str
    created_at: str | None  # raw source timestamp, parsed lazily
    like_count: int = 0
    retweet_count: int = 0
    reply_count: int = 0
    quoted: "Bookmark | None" = None

    @property
    def tweet_url(self) -> str:
        return f"https://x.com/{self.author.username}/status/{self.tweet_id}"

    @classmethod
    def from_dict(cls, record: Any) -> "Bookmark":
        """Build a Bookmark from one exported record, applying defaults."""
        record = _as_dict(record)
        tweet_id = record.get("id")
        quoted = record.get("quotedTweet")

        return cls(
            tweet_id="" if tweet_id is None else str(tweet_id),
            author=Author.from_dict(record.get("author")),
            text=record.get("text") or "",
            created_at=record.get("createdAt"),
            like_count=_count(record.get("likeCount")),
            retweet_count=_count(record.get("retweetCount")),
            reply_count=_count(record.get("replyCount")),
            quoted=cls.from_dict(quoted) if isinstance(quoted, dict) else None,
        )
