"""Date helpers shared by the API, stats and CLI."""

from datetime import date, datetime, timedelta, timezone


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_datetime(value: str | datetime | date) -> datetime:
    """Parse an ISO-8601 value into an aware UTC datetime.

    Accepts a trailing ``Z`` and date-only strings; naive values are
    taken to be UTC.

    Raises:
        ValueError: if the string is not ISO-8601
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif not isinstance(value, str):
        raise ValueError(f"Not a date: {value!r}")
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_iso(dt: datetime | None) -> str | None:
    """Format as a UTC ISO string with millisecond precision, e.g. ``2024-06-15T12:00:00.000Z``.

    Stored dates use the same fixed-width format, so they sort lexically.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def format_distance_to_now(dt: datetime, now: datetime | None = None) -> str:
    """Human-friendly relative time ("just now", "3h ago", "yesterday", ...)."""
    now = now or utcnow()
    if dt.tzinfo is None and now.tzinfo is not None:
        dt = dt.replace(tzinfo=now.tzinfo)
    seconds = int((now - dt).total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if seconds < 60:
        return "just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days == 1:
        return "yesterday"
    if days < 7:
        return f"{days}d ago"
    if days < 30:
        return f"{days // 7}w ago"
    return f"{dt:%b} {dt.day}"


def format_date(dt: datetime | date) -> str:
    """Short date, e.g. ``Sat, Jun 15``."""
    return f"{dt:%a, %b} {dt.day}"


def format_full_date(dt: datetime | date) -> str:
    """Long date, e.g. ``Saturday, June 15, 2024``."""
    return f"{dt:%A, %B} {dt.day}, {dt.year}"


def get_week_number(dt: datetime | date) -> int:
    """ISO week number."""
    return dt.isocalendar()[1]


def get_start_of_week(dt: datetime) -> datetime:
    """Monday 00:00:00 of the week containing ``dt``."""
    monday = dt - timedelta(days=dt.weekday())
    return monday.replace(hour=0, minute=0, second=0, microsecond=0)


def get_end_of_week(dt: datetime) -> datetime:
    """Sunday 23:59:59.999999 of the week containing ``dt``."""
    sunday = get_start_of_week(dt) + timedelta(days=6)
    return sunday.replace(hour=23, minute=59, second=59, microsecond=999999)


def week_start_key(dt: datetime) -> str:
    """Monday of the week as ``YYYY-MM-DD``; used to group workouts by week."""
    return get_start_of_week(dt).date().isoformat()
