"""Health check endpoint."""

import time

from fastapi import APIRouter, Request

from formguard import __version__
from formguard.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Liveness plus the number of form definitions available."""
    store = getattr(request.app.state, "form_store", None)
    forms_loaded = len(store) if store is not None else 0

    return HealthResponse(
        status="healthy" if forms_loaded else "degraded",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
        forms_loaded=forms_loaded,
    )
