"""Current-user routes: profile, settings and account deletion."""

from pathlib import Path

from fastapi import APIRouter, Depends, Request

from ...db.repositories import UserRepository
from ...errors import BadRequest, NotFound
from ...services.accounts import delete_account, update_settings
from ...services.auth import SessionUser
from ..deps import get_app_db_path, read_json_body, require_session

router = APIRouter(prefix="/api/user", tags=["user"])


@router.get("")
async def get_user(
    session: SessionUser = Depends(require_session),
    db_path: Path = Depends(get_app_db_path),
):
    """Get the signed-in user with settings."""
    user = await UserRepository(db_path).get(session.id)
    if user is None:
        raise NotFound("User not found")
    return {"success": True, "data": user.to_client_dict()}


@router.put("")
async def put_user_settings(
    request: Request,
    session: SessionUser = Depends(require_session),
    db_path: Path = Depends(get_app_db_path),
):
    """Merge the supplied settings keys into the stored settings."""
    body = await read_json_body(request)
    settings = body.get("settings")
    if not settings:
        raise BadRequest("Settings required")
    if not isinstance(settings, dict):
        raise BadRequest("Invalid settings")

    try:
        user = await update_settings(session.id, settings, db_path)
    except (TypeError, ValueError):
        raise BadRequest("Invalid settings")

    if user is None:
        raise NotFound("User not found")
    return {"success": True, "data": user.to_client_dict()}


@router.delete("")
async def delete_user(
    session: SessionUser = Depends(require_session),
    db_path: Path = Depends(get_app_db_path),
):
    """Delete the account and everything it owns."""
    await delete_account(session.id, db_path)
    return {"success": True}
