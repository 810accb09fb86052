"""FastAPI routes for access checks and health."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from geo_gate import __version__
from geo_gate.config import get_settings
from geo_gate.models.decision import AccessDecision
from geo_gate.models.health import DatabaseStatus, HealthResponse
from geo_gate.service import AccessService

logger = logging.getLogger(__name__)

router = APIRouter()

# Dependency injection
_access_service: AccessService | None = None

IPV4_MAPPED_PREFIX = "::ffff:"


def get_access_service() -> AccessService:
    """Get or create access service instance."""
    global _access_service
    if _access_service is None:
        _access_service = AccessService.from_settings(get_settings())
    return _access_service


def close_access_service() -> None:
    """Close and drop the access service instance."""
    global _access_service
    if _access_service is not None:
        _access_service.close()
        _access_service = None


def get_client_ip(request: Request, trust_forwarded_for: bool = True) -> str:
    """Extract the originating client address from the request.

    Uses the first X-Forwarded-For entry when trusted, otherwise the peer
    address with any IPv4-mapped prefix removed.
    """
    if trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()

    host = request.client.host if request.client else ""
    if host.startswith(IPV4_MAPPED_PREFIX):
        host = host[len(IPV4_MAPPED_PREFIX):]
    return host


@router.get(
    "/check-access",
    response_model=AccessDecision,
    responses={500: {"description": "Geolocation error"}},
)
def check_access(
    request: Request,
    service: Annotated[AccessService, Depends(get_access_service)],
):
    """Decide whether the calling client is allowed in."""
    ip = get_client_ip(request, get_settings().trust_forwarded_for)
    try:
        return service.check_access(ip)
    except Exception as e:
        logger.error(f"Access check failed for {ip}: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Geolocation error"},
        )


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Health check endpoint."""
    databases = (
        _access_service.database_status()
        if _access_service is not None
        else DatabaseStatus()
    )
    return HealthResponse(version=__version__, databases=databases)
