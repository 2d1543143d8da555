"""Request dependencies and parsing helpers shared by the routers."""

from pathlib import Path

from fastapi import Header, Request

from ..errors import BadRequest, Unauthorized
from ..services.auth import SessionUser, decode_token

# SQLite INTEGER is a signed 64-bit value
MAX_ID = 2**63 - 1


def get_app_db_path(request: Request) -> Path:
    """Get the database path from app state."""
    return request.app.state.db_path


async def require_session(authorization: str | None = Header(None)) -> SessionUser:
    """Resolve the caller from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        raise Unauthorized()
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise Unauthorized()
    return decode_token(token.strip())


async def read_json_body(request: Request) -> dict:
    """Parse the request body as a JSON object."""
    try:
        body = await request.json()
    except ValueError:
        raise BadRequest("Invalid JSON body")
    if not isinstance(body, dict):
        raise BadRequest("Invalid JSON body")
    return body


def parse_id(raw: str, message: str) -> int:
    """Parse a client-supplied document id, rejecting malformed ones."""
    if not (raw.isascii() and raw.isdigit()):
        raise BadRequest(message)
    value = int(raw)
    if value > MAX_ID:
        raise BadRequest(message)
    return value


def parse_int_param(raw: str | None, default: int | None = None) -> int | None:
    """Parse an integer query parameter, falling back to ``default``.

    An unparseable ``phase`` or ``week`` filter is dropped rather than
    matching nothing, so the listing widens instead of coming back empty.
    """
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if abs(value) <= MAX_ID else default


def optional_int(body: dict, field: str) -> int | None:
    """Read an optional integer body field."""
    value = body.get(field)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or abs(value) > MAX_ID:
        raise BadRequest(f"Invalid {field}")
    return value


def optional_str(body: dict, field: str) -> str | None:
    """Read an optional string body field."""
    value = body.get(field)
    if value is not None and not isinstance(value, str):
        raise BadRequest(f"Invalid {field}")
    return value
