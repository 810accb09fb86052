"""Lookup records produced by the geo and ASN databases."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

UNKNOWN = "Unknown"


class GeoRecord(BaseModel):
    """Resolved location for a single address."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    country: str = UNKNOWN  # ISO-3166 alpha-2
    region: str = UNKNOWN
    city: str = UNKNOWN
    latitude: float | None = None
    longitude: float | None = None


class AsnRecord(BaseModel):
    """Autonomous system that announces the address."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    number: int
    organization: str = ""
