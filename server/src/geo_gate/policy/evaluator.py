"""Policy evaluation: geographic allow-lists combined with anonymization checks."""

from geo_gate.detection.classifier import ASN_UNAVAILABLE_REASON
from geo_gate.models.decision import AccessDecision, BlockReason, PolicyConfig
from geo_gate.models.detection import ClassificationVerdict
from geo_gate.models.geo import UNKNOWN, AsnRecord, GeoRecord

LOOPBACK_ADDRESSES = frozenset({"127.0.0.1", "::1", "localhost"})

LOOPBACK_ERROR = "Localhost IP cannot be geolocated"
NOT_FOUND_ERROR = "IP not found in database"


def is_loopback(ip: str) -> bool:
    """Check if the address is one of the loopback literals."""
    return ip in LOOPBACK_ADDRESSES


def evaluate(
    geo: GeoRecord | None,
    verdict: ClassificationVerdict | None,
    policy: PolicyConfig,
    ip: str,
    asn: AsnRecord | None = None,
) -> AccessDecision:
    """Combine geo data and classification into an access decision.

    Args:
        geo: Geo record for the address, None if the address was not found
        verdict: Classification verdict, None means "ASN data unavailable"
        policy: Static allow-lists
        ip: The client address
        asn: ASN record to echo in the decision

    Returns:
        AccessDecision. Geographic restriction is always reported ahead of
        VPN/Proxy when both apply.
    """
    if is_loopback(ip):
        return AccessDecision(allowed=False, ip=ip, error=LOOPBACK_ERROR)

    if geo is None:
        return AccessDecision(allowed=False, ip=ip, error=NOT_FOUND_ERROR)

    if verdict is None:
        verdict = ClassificationVerdict(reasons=[ASN_UNAVAILABLE_REASON])

    is_geo_allowed = ip in policy.allowed_ips or geo.country in policy.allowed_countries
    is_vpn_blocked = verdict.is_vpn or verdict.is_proxy

    block_reason: BlockReason | None = None
    if not is_geo_allowed:
        block_reason = BlockReason.GEOGRAPHIC
    elif is_vpn_blocked:
        block_reason = BlockReason.VPN_PROXY

    return AccessDecision(
        allowed=is_geo_allowed and not is_vpn_blocked,
        block_reason=block_reason,
        ip=ip,
        country=geo.country,
        region=geo.region,
        city=geo.city,
        latitude=geo.latitude,
        longitude=geo.longitude,
        asn=asn.number if asn else None,
        organization=(asn.organization or UNKNOWN) if asn else UNKNOWN,
        vpn_detection=verdict,
    )
