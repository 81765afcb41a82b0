"""
Health check router.

Provides a simple health endpoint for liveness and readiness checks.
No business logic and no database access.
"""

from fastapi import APIRouter

from app.interfaces.accounts.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application liveness status.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="up")
