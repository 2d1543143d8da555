"""Sign-in and session tokens.

Identity-provider wiring lives outside this service. A caller that has
verified an identity calls ``sign_in`` and hands the resulting token to the
client, which sends it back as ``Authorization: Bearer <token>``.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

import jwt

from ..config import get_secret_key, get_token_ttl_days
from ..db.repositories import UserRepository
from ..errors import Unauthorized
from ..models.user import User, default_settings
from ..utils.date_utils import utcnow

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


@dataclass
class SessionUser:
    """Identity carried by a valid session token."""

    id: int
    email: str


async def sign_in(
    email: str,
    name: str,
    image: str | None = None,
    provider_account_id: str | None = None,
    db_path: Path | None = None,
) -> User:
    """Create the user on first sign-in, otherwise refresh name and image."""
    repo = UserRepository(db_path)
    user = await repo.get_by_email(email)

    if user is None:
        user = User(
            email=email,
            name=name,
            image=image,
            provider_account_id=provider_account_id,
            settings=default_settings(),
        )
        await repo.create(user)
        logger.info("Created user %s (id=%s)", email, user.id)
        return user

    await repo.update_profile(user.id, name, image)
    return await repo.get(user.id)


def issue_token(user: User, ttl: timedelta | None = None) -> str:
    """Sign a session token for ``user``."""
    now = utcnow()
    if ttl is None:
        ttl = timedelta(days=get_token_ttl_days())
    payload = {
        "sub": str(user.id),
        "email": user.email,
        "iat": now,
        "exp": now + ttl,
    }
    return jwt.encode(payload, get_secret_key(), algorithm=ALGORITHM)


def decode_token(token: str) -> SessionUser:
    """Verify a session token.

    Raises:
        Unauthorized: If the token is malformed, tampered with or expired.
    """
    try:
        payload = jwt.decode(token, get_secret_key(), algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise Unauthorized()
    except jwt.InvalidTokenError:
        logger.debug("Rejected invalid session token")
        raise Unauthorized()

    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise Unauthorized()

    return SessionUser(id=user_id, email=payload.get("email", ""))
