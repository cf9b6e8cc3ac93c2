"""Health check endpoint. Makes no external calls."""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    now = datetime.now(timezone.utc)
    return HealthResponse(
        status="ok",
        message="Deployment API is running",
        timestamp=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )
