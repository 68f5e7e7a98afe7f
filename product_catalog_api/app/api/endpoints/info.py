"""
Information endpoint.

``GET /`` is a liveness check returning the service name and version.
It is the only route that does not require an API key.
"""

from typing import Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/", response_model=Dict[str, str])
async def get_info(request: Request) -> Dict[str, str]:
    settings = request.app.state.settings
    return {"name": settings.project_name, "version": settings.api_version, "status": "ok"}
