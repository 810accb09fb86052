"""Pydantic models for Geo Gate - the contracts."""

from geo_gate.models.decision import AccessDecision, BlockReason, PolicyConfig
from geo_gate.models.detection import ClassificationVerdict, Confidence
from geo_gate.models.geo import UNKNOWN, AsnRecord, GeoRecord
from geo_gate.models.health import DatabaseStatus, HealthResponse

__all__ = [
    "UNKNOWN",
    "AccessDecision",
    "AsnRecord",
    "BlockReason",
    "ClassificationVerdict",
    "Confidence",
    "DatabaseStatus",
    "GeoRecord",
    "HealthResponse",
    "PolicyConfig",
]
