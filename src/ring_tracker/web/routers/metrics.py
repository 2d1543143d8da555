"""Body metrics routes."""

from pathlib import Path

from fastapi import APIRouter, Depends, Request

from ...db.repositories import BodyMetricsRepository
from ...errors import BadRequest, NotFound
from ...models.metrics import BodyMeasurements, BodyMetrics
from ...services.auth import SessionUser
from ...utils.date_utils import parse_datetime, utcnow
from ..deps import (
    MAX_ID,
    get_app_db_path,
    optional_str,
    parse_id,
    read_json_body,
    require_session,
)

router = APIRouter(prefix="/api/metrics", tags=["metrics"])

LIST_LIMIT = 100


@router.get("")
async def list_metrics(
    session: SessionUser = Depends(require_session),
    db_path: Path = Depends(get_app_db_path),
):
    """The user's latest body metrics, newest first."""
    metrics = await BodyMetricsRepository(db_path).list_for_user(session.id, limit=LIST_LIMIT)
    return {"success": True, "data": [m.to_client_dict() for m in metrics]}


@router.post("")
async def create_metric(
    request: Request,
    session: SessionUser = Depends(require_session),
    db_path: Path = Depends(get_app_db_path),
):
    """Record a body metrics entry; ``date`` defaults to now."""
    body = await read_json_body(request)

    try:
        date = parse_datetime(body["date"]) if body.get("date") else utcnow()
    except (TypeError, ValueError):
        raise BadRequest("Invalid date")

    weight = body.get("weight")
    if weight is not None and (
        isinstance(weight, bool) or not isinstance(weight, (int, float)) or abs(weight) > MAX_ID
    ):
        raise BadRequest("Invalid weight")

    measurements = body.get("measurements")
    if measurements is not None and not isinstance(measurements, dict):
        raise BadRequest("Invalid measurements")

    metric = BodyMetrics(
        user_id=session.id,
        date=date,
        weight=weight,
        measurements=BodyMeasurements.from_dict(measurements),
        notes=optional_str(body, "notes"),
    )
    metric = await BodyMetricsRepository(db_path).create(metric)
    return {"success": True, "data": metric.to_client_dict()}


@router.delete("/{metric_id}")
async def delete_metric(
    metric_id: str,
    session: SessionUser = Depends(require_session),
    db_path: Path = Depends(get_app_db_path),
):
    """Delete one of the user's entries."""
    deleted = await BodyMetricsRepository(db_path).delete(parse_id(metric_id, "Invalid ID"), session.id)
    if not deleted:
        raise NotFound("Metric not found")
    return {"success": True}
