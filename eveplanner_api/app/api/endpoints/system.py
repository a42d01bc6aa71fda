"""
Service‑level endpoints: dashboard statistics and liveness.
"""

import sqlite3
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.common import HealthRead, StatisticsRead
from ...services.statistics_service import StatisticsService
from ..deps import get_statistics_service

router = APIRouter()


@router.get("/statistics", response_model=StatisticsRead)
async def get_statistics(
    service: StatisticsService = Depends(get_statistics_service),
) -> StatisticsRead:
    """Return total counts of users, events and files."""
    try:
        return await service.overview()
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e


@router.get("/health", response_model=HealthRead)
async def health() -> HealthRead:
    # Does not touch the database.
    return HealthRead(status="Server is running", timestamp=datetime.now(timezone.utc))
