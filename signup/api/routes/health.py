"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ returns 200 whenever the process is up
"""

from fastapi import APIRouter, Depends, status

from signup.config import get_settings
from signup.infrastructure.user_store import InMemoryUserStore, get_user_store

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
def health_check(store: InMemoryUserStore = Depends(get_user_store)):
    """Basic liveness probe with the registered-user count."""
    return {
        "status": "healthy",
        "service": get_settings().service_name,
        "users": len(store),
    }
