"""Policy and access decision models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from geo_gate.models.detection import ClassificationVerdict
from geo_gate.models.geo import UNKNOWN


class BlockReason(str, Enum):
    """Why an address was denied."""

    GEOGRAPHIC = "Geographic restriction"
    VPN_PROXY = "VPN/Proxy detected"


class PolicyConfig(BaseModel):
    """Static allow-lists, read-only for the life of the process."""

    model_config = ConfigDict(frozen=True)

    allowed_ips: frozenset[str] = Field(default_factory=frozenset)
    allowed_countries: frozenset[str] = Field(default_factory=frozenset)


class AccessDecision(BaseModel):
    """Final verdict for one request.

    Geo, ASN and classification data are echoed whatever the outcome.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    allowed: bool
    block_reason: BlockReason | None = None
    ip: str
    country: str = UNKNOWN
    region: str = UNKNOWN
    city: str = UNKNOWN
    latitude: float | None = None
    longitude: float | None = None
    asn: int | None = None
    organization: str = UNKNOWN
    vpn_detection: ClassificationVerdict | None = None
    error: str | None = None  # Advisory marker, not a failure
