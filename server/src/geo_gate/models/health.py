"""Health check models."""

from pydantic import BaseModel


class DatabaseStatus(BaseModel):
    """Which MaxMind databases are loaded."""

    city: bool = False
    asn: bool = False


class HealthResponse(BaseModel):
    """Response body for GET /health."""

    status: str = "ok"
    version: str
    databases: DatabaseStatus
