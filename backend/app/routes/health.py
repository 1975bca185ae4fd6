"""
Notes API Backend: Health Check Route
=====================================

What:  GET /api/health, a liveness probe for monitors and the browser client.
How:   Answers 200 with the server time. The Note Store is not consulted, so
       the probe succeeds whatever the store holds, including nothing.
"""

from fastapi import APIRouter

from app.models.note import format_timestamp, utc_now
from app.schemas.note import HealthResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(timestamp=format_timestamp(utc_now()))
