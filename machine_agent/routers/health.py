"""Liveness and discovery endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from machine_agent.models.responses import HealthResponse, HomeResponse
from machine_agent.services.shell import platform_name

router = APIRouter(tags=["health"])

ENDPOINTS: dict[str, str] = {
    "/execute": "POST - Execute a command and wait for response",
    "/execute-async": "POST - Execute a command asynchronously (fire and forget)",
    "/health": "GET - Check API health",
}


@router.get("/", response_model=HomeResponse)
async def home() -> HomeResponse:
    """List the available endpoints."""
    return HomeResponse(message="Machine Agent API", endpoints=dict(ENDPOINTS))


@router.get("/health", response_model=HealthResponse)
async def service_health() -> HealthResponse:
    """Basic liveness probe."""
    return HealthResponse(status="healthy", platform=platform_name())
