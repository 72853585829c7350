"""Entry Rendering — display records for the board view.

Invariants:
    - Post number is the id zero-padded to 8 digits
    - Dates render en-US style: "Sun Oct 19 25 2:30 PM" (no commas)
    - Naive datetimes are treated as UTC before conversion to the display zone
    - Comment HTML is built from escaped text: stored markup is never emitted raw
    - name and sub stay plain text; only comment is an HTML fragment
    - Only lines whose first character is ">" get the greentext span

Design Decisions:
    - Pure functions over a template engine: the board only needs one fragment shape
    - html.escape(quote=False) keeps apostrophes readable; < > & are still neutralized
"""

import html
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo

from diary.core.repository_protocols import EntryLike

POST_NUMBER_WIDTH = 8
GREENTEXT_CLASS = "greentext"
_ESCAPED_MARKER = "&gt;"


@dataclass(frozen=True)
class ThreadView:
    """Display record for one entry on the board."""
    id: int
    no: str
    name: str
    sub: str
    date: str
    comment: str


def format_post_number(entry_id: int) -> str:
    return str(entry_id).zfill(POST_NUMBER_WIDTH)


def format_post_date(created_at: datetime, tz: tzinfo = timezone.utc) -> str:
    """Format a timestamp the way the board header shows it."""
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    local = created_at.astimezone(tz)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local:%a} {local:%b} {local.day} {local:%y} "
        f"{hour}:{local:%M} {meridiem}"
    )


def render_comment_html(greentext: str) -> str:
    """Escape greentext and wrap '>' lines in the greentext span, joined by <br>."""
    rendered = []
    for line in greentext.split("\n"):
        escaped = html.escape(line, quote=False)
        if escaped.startswith(_ESCAPED_MARKER):
            escaped = f'<span class="{GREENTEXT_CLASS}">{escaped}</span>'
        rendered.append(escaped)
    return "<br>".join(rendered)


def to_thread_view(entry: EntryLike, tz: tzinfo = timezone.utc) -> ThreadView:
    """Build a ThreadView from a stored entry."""
    return ThreadView(
        id=entry.id,
        no=format_post_number(entry.id),
        name=entry.name or "",
        sub=entry.sub or "",
        date=format_post_date(entry.created_at, tz),
        comment=render_comment_html(entry.greentext or ""),
    )
