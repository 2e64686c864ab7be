"""Render bookmark records to a markdown document.

Output starts with a short header (title, export date, count) followed by
one entry per bookmark in input order, each terminated by ---.
"""

from datetime import date, datetime, timezone

from .dates import format_display_date
from .models import Bookmark


def escape_markdown(text: str) -> str:
    """Escape angle brackets so text is not read as embedded HTML."""
    if not text:
        return ""
    return text.replace("<", "&lt;").replace(">", "&gt;")


def render_bookmarks_file(records: list, exported_on: date | None = None) -> str:
    """Render a complete bookmarks markdown file."""
    if exported_on is None:
        exported_on = datetime.now(timezone.utc).date()

    lines: list[str] = [
        "# X Bookmarks",
        "",
        f"Exported on: {exported_on.isoformat()}",
        f"Total bookmarks: {len(records)}",
        "",
        "---",
        "",
    ]
    for record in records:
        lines.extend(_render_single_bookmark(Bookmark.from_dict(record)))

    return "\n".join(lines)


def _render_single_bookmark(bookmark: Bookmark) -> list[str]:
    """Render a single bookmark entry as a list of lines."""
    author = bookmark.author
    lines = [
        f"## {author.name} (@{author.username})",
        f"**Date:** {format_display_date(bookmark.created_at)}",
        "",
        escape_markdown(bookmark.text),
        "",
        f"- Likes: {bookmark.like_count} | Retweets: {bookmark.retweet_count}"
        f" | Replies: {bookmark.reply_count}",
        f"- [View tweet]({bookmark.tweet_url})",
    ]

    if bookmark.quoted is not None:
        quoted = bookmark.quoted
        quoted_text = escape_markdown(quoted.text)
        lines.append("")
        lines.append(
            f"> **Quoted: {quoted.author.name} (@{quoted.author.username})**"
        )
        lines.extend(f"> {line}" for line in quoted_text.split("\n"))

    lines.extend(["", "---", ""])
    return lines
