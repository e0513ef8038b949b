"""
Health check endpoint.

Reports whether the contact store is reachable, for load balancers and
monitoring.  A closed store yields HTTP 503.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from contacts_api.app.core.db import StorageError, get_store

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health_check(request: Request) -> Any:
    """Return service status and the number of stored contacts."""
    settings = request.app.state.settings
    body: Dict[str, Any] = {
        "status": "healthy",
        "environment": settings.environment,
        "version": settings.api_version,
    }
    try:
        body["contacts"] = get_store().count()
    except StorageError:
        body["status"] = "unavailable"
        body["contacts"] = None
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return body
