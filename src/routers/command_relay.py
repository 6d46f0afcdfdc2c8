import uuid
from typing import AsyncGenerator, Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request

from src.commands.impl.health_check_command import HealthCheckCommand
from src.commands.impl.relay_command import RelayCommand, is_missing_command
from src.commands.interfaces.command_context import CommandContext
from src.config.relay_settings import RelaySettings
from src.models.requests import CommandRelayRequest
from src.models.responses import (
    ErrorResponse,
    HealthCheckResponse,
    RelaySuccessResponse,
)
from src.util.errors import RelayFailedError


# Initialize router
router = APIRouter(
    tags=["Command Relay"],
    responses={404: {"model": ErrorResponse, "description": "Not found"}},
)


# Dependency functions
def get_relay_settings(request: Request) -> RelaySettings:
    """Get the relay settings the application was created with"""
    return request.app.state.relay_settings


async def get_http_client(
    settings: RelaySettings = Depends(get_relay_settings),
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Open an outbound client for the lifetime of one request"""
    # Apps Script /exec answers with a redirect to the script output
    async with httpx.AsyncClient(
        timeout=settings.timeout_seconds, follow_redirects=True
    ) as client:
        yield client


@router.post(
    "/api/triggerMESCommand",
    response_model=RelaySuccessResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@router.post(
    "/",
    response_model=RelaySuccessResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def relay_command(
    request: Request,
    payload: Optional[CommandRelayRequest] = None,
    settings: RelaySettings = Depends(get_relay_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> RelaySuccessResponse:
    """
    Forward the inbound command to the webhook and return its response.

    One outbound POST per valid request, no retries.
    """
    command = payload.command if payload is not None else None
    if is_missing_command(command):
        raise HTTPException(status_code=400, detail="Missing command")

    request_id = str(uuid.uuid4())
    context = CommandContext(
        request_id=request_id,
        settings=settings,
        http_client=http_client,
        command=command,
        metadata={
            "path": request.url.path,
            "client": request.client.host if request.client else None,
        },
    )

    result = await RelayCommand().run(context)

    if result.is_failure():
        raise RelayFailedError(
            detail=result.error_message or "Unknown error", request_id=request_id
        )

    return RelaySuccessResponse(proxy_status="ok", google_response=result.data)


@router.get("/healthz", response_model=HealthCheckResponse, tags=["Health"])
async def health_check(
    settings: RelaySettings = Depends(get_relay_settings),
) -> HealthCheckResponse:
    """Report relay configuration; never contacts the webhook."""
    request_id = str(uuid.uuid4())
    context = CommandContext(
        request_id=request_id,
        settings=settings,
        metadata={"check_type": "health"},
    )

    result = await HealthCheckCommand().run(context)

    if result.is_failure():
        raise HTTPException(
            status_code=503,  # Service Unavailable
            detail=f"Health check failed: {result.error_message}",
        )

    if not result.data:
        raise HTTPException(
            status_code=500,
            detail="Health check succeeded but no health data returned",
        )

    health_data = result.data
    return HealthCheckResponse(
        status=health_data["overall_status"],
        request_id=request_id,
        overall_status=health_data["overall_status"],
        timestamp=health_data["timestamp"],
        checks=health_data["checks"],
        unhealthy_components=health_data["unhealthy_components"],
    )
