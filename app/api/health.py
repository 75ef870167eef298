"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(request: Request, db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Always 200 while the process is up; `database` reports whether SELECT 1 succeeds."""
    return HealthResponse(
        environment=request.app.state.settings.APP_ENV,
        version=request.app.version,
        database="connected" if check_db_connected(db) else "disconnected",
    )
