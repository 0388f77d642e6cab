"""Text, date and URL helpers used when rendering pages."""

import html
import re
from datetime import datetime, timezone

from dateutil import parser as dateparser

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
TRAILING_PARTIAL_WORD = re.compile(r"\s+\S*$")
YOUTUBE_ID = re.compile(r"(?:v=|/embed/|youtu\.be/|/v/)([A-Za-z0-9_-]{6,})")


def escape_html(value: object) -> str:
    """Escape a value for HTML text or attribute context. None becomes ''."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def text_to_html(text: str | None) -> str:
    """Convert plain text to escaped <p> paragraphs.

    Paragraphs are separated by blank lines; single newlines inside a
    paragraph become <br/>.
    """
    if not text:
        return ""
    paragraphs = [p.strip() for p in PARAGRAPH_BREAK.split(text)]
    rendered = []
    for paragraph in paragraphs:
        if paragraph:
            escaped = escape_html(paragraph).replace("\n", "<br/>")
            rendered.append(f"<p>{escaped}</p>")
    return "\n".join(rendered)


def collapse_whitespace(text: str | None) -> str:
    return " ".join((text or "").split())


def excerpt_text(text: str | None, max_length: int = 220) -> str:
    """Whitespace-collapsed text cut at a word boundary, with '...' if truncated."""
    collapsed = collapse_whitespace(text)
    if len(collapsed) <= max_length:
        return collapsed
    truncated = collapsed[:max_length]
    return TRAILING_PARTIAL_WORD.sub("", truncated) + "..."


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, or any other shape dateutil understands
    (RFC 2822, "2024/01/15", "January 15, 2024"). Naive values are taken as UTC.

    Raises:
        ValueError: If the value is not a recognisable timestamp.
    """
    value = value.strip()
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        parsed = dateparser.parse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_iso(moment: datetime) -> str:
    """Render as UTC with millisecond precision, e.g. 2024-01-15T10:30:00.000Z."""
    moment = moment.astimezone(timezone.utc)
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}Z"


def format_iso(value: str | None, now: datetime) -> str:
    """Machine-readable timestamp; falls back to `now` if value can't be parsed."""
    if value:
        try:
            return to_iso(parse_timestamp(value))
        except (ValueError, OverflowError):
            pass
    return to_iso(now)


def format_display_date(value: str | None) -> str:
    """DD/MM/YYYY display date; the raw value is returned if it can't be parsed."""
    if not value:
        return ""
    try:
        return f"{parse_timestamp(value):%d/%m/%Y}"
    except (ValueError, OverflowError):
        return value


def merge_keywords(*groups: list[str]) -> str:
    """Join names from all groups, dropping duplicates but keeping first-seen order."""
    seen = dict.fromkeys(name for group in groups for name in group)
    return ", ".join(seen)


def youtube_id_from_url(url: str | None) -> str | None:
    """Extract the video id from common YouTube share and embed URL shapes."""
    if not url:
        return None
    match = YOUTUBE_ID.search(url)
    return match.group(1) if match else None
