"""
Healthcheck endpoints.

`/api` returns service information, `/api/health` returns 200 OK if the app
is up and `/api/ready` checks that the database is reachable.
"""
from __future__ import annotations

import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy import text

from ..config import settings
from ..deps import get_db

router = APIRouter(prefix="/api", tags=["health"])

API_VERSION = "1.0.0"


@router.get("")
def api_info():
    return {
        "success": True,
        "message": f"{settings.app_name} API is running!",
        "timestamp": dt.datetime.utcnow().isoformat(),
        "version": API_VERSION,
    }


@router.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/ready")
def ready(db: Session = Depends(get_db)):
    """Readiness probe; checks DB connectivity."""
    try:
        db.execute(text("SELECT 1"))
    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Database unavailable: {exc}",
        )
    return {"status": "ready"}
