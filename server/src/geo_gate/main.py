"""FastAPI application entry point for Geo Gate."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geo_gate import __version__
from geo_gate.api.routes import close_access_service, get_access_service, router
from geo_gate.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting Geo Gate Server v{__version__}")
    settings = get_settings()
    logger.info(f"Debug mode: {settings.debug}")

    # Fail fast if the City database is missing
    service = get_access_service()
    policy = service.policy
    logger.info(
        f"Policy: {len(policy.allowed_countries)} allowed countries, "
        f"{len(policy.allowed_ips)} allowed IPs, "
        f"ASN detection {'enabled' if service.asn_available else 'disabled'}"
    )

    yield

    # Shutdown
    close_access_service()
    logger.info("Shutting down Geo Gate Server")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Geo Gate",
        description="Geographic and VPN-aware access decisions",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    app.include_router(router)

    return app


# Create app instance for uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "geo_gate.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
