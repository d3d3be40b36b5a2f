"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from invoicebuddy.api.dependencies import get_store
from invoicebuddy.application.dto import HealthResponse
from invoicebuddy.config import get_settings
from invoicebuddy.core.interfaces import IRecordStore
from invoicebuddy.infrastructure.storage.jsonfile import COLLECTIONS

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(store: IRecordStore = Depends(get_store)) -> HealthResponse:
    """
    Health check with storage status.

    Reports the record count of each collection. Unreadable files count
    as empty, so this endpoint stays healthy while reads fail open.
    """
    settings = get_settings()
    collections = {name: len(await store.load_all(name)) for name in COLLECTIONS}

    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        data_dir=str(settings.storage.data_dir),
        collections=collections,
    )
