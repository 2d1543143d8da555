"""String helpers for timers and URL slugs."""

import re

DEFAULT_REST_SECONDS = 90

_REST_PATTERN = re.compile(r"(\d+):(\d{2})")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def format_time(seconds: int) -> str:
    """Format seconds as ``M:SS`` (minutes are not wrapped into hours)."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def parse_rest_time(rest: str) -> int:
    """Seconds of the first ``M:SS`` in a rest prescription.

    Ranges such as ``2:00-3:00`` use the lower bound. Anything unparseable
    (``self``, empty strings) falls back to 90 seconds.
    """
    match = _REST_PATTERN.search(rest or "")
    if not match:
        return DEFAULT_REST_SECONDS
    return int(match.group(1)) * 60 + int(match.group(2))


def slugify(text: str) -> str:
    """``Ring Push-Ups (Advanced)`` -> ``ring-push-ups-advanced``."""
    return _NON_ALNUM.sub("-", text.lower()).strip("-")


def unslugify(slug: str) -> str:
    """``hello-world`` -> ``Hello World``.

    Not an inverse of :func:`slugify`: punctuation and original casing are lost.
    """
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-") if word)
