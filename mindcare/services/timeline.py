import re
from datetime import date, datetime, timezone

_DAY = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_timestamp(ts: str) -> datetime:
    dt = datetime.fromisoformat(ts.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_day(day: str) -> date:
    """Strict 'YYYY-MM-DD' calendar day."""
    if not _DAY.fullmatch(day):
        raise ValueError(f"expected YYYY-MM-DD, got {day!r}")
    return date.fromisoformat(day)


def format_date(ts: str) -> str:
    """'Oct 19, 2026' in local time."""
    dt = parse_timestamp(ts).astimezone()
    return f"{dt:%b} {dt.day}, {dt.year}"


def format_time(ts: str) -> str:
    """'03:45 PM' in local time."""
    return parse_timestamp(ts).astimezone().strftime("%I:%M %p")


def human_delta(ts: str, now: datetime | None = None) -> str:
    """Chat-bubble age: 'Just now', '5h ago', or the plain date."""
    then = parse_timestamp(ts)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.astimezone()
    hours = (now - then).total_seconds() / 3600
    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{int(hours)}h ago"
    local = then.astimezone()
    return f"{local.month}/{local.day}/{local.year}"
