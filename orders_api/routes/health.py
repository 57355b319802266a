"""
Health check route: /api/v1/health-check
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from orders_api.schemas import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health-check",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    summary="System Health Check",
)
async def health_check(request: Request):
    """Liveness probe: database reachable, preparation service reachable."""
    database = request.app.state.database
    preparation_service = request.app.state.preparation_service

    db_error = await database.ping()
    db_status = "healthy" if db_error is None else f"unhealthy: {db_error}"

    preparation_status = "healthy" if await preparation_service.health_check() else "unhealthy"

    # The preparation service is best-effort; only the database decides liveness
    if db_error is not None:
        overall = "down"
    elif preparation_status != "healthy":
        overall = "degraded"
    else:
        overall = "operational"

    health = HealthResponse(
        status=overall,
        database=db_status,
        preparation_service=preparation_status,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=200 if db_error is None else 503,
        content=health.model_dump(mode="json", by_alias=True),
    )
