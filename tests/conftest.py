"""Shared test fixtures."""

import json
import time

import pytest


@pytest.fixture(autouse=True)
def utc_timezone(monkeypatch):
    """Pin the local timezone so day boundaries are deterministic."""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def sample_records() -> list[dict]:
    """Bookmark records as exported by bird."""
    return [
        {
            "id": "1234567890",
            "createdAt": "Sat Jan 10 09:30:00 +0000 2026",
            "text": "First bookmark with a <tag> in it",
            "author": {"name": "Test User", "username": "testuser"},
            "likeCount": 12,
            "retweetCount": 3,
            "replyCount": 1,
        },
        {
            "id": "9876543210",
            "createdAt": "Tue Jan 20 16:01:16 +0000 2026",
            "text": "Quoting something",
            "author": {"name": "The Quoter", "username": "quoter"},
            "likeCount": 5,
            "quotedTweet": {
                "id": "4444444444",
                "text": "Original line one\nline <two>",
                "author": {"name": "Original Author", "username": "originalauthor"},
            },
        },
        {
            "id": "5555555555",
            "createdAt": "Sun Jan 25 00:00:01 +0000 2026",
            "text": "Latest one",
            "author": {"name": "Late Poster", "username": "late"},
        },
    ]


@pytest.fixture
def bookmarks_file(tmp_path, sample_records):
    path = tmp_path / "bookmarks.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path
