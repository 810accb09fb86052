"""Anonymization detection for access decisions."""

from geo_gate.detection.classifier import (
    ASN_UNAVAILABLE_REASON,
    HOSTING_KEYWORDS,
    KNOWN_VPN_ASNS,
    TOR_KEYWORDS,
    VPN_KEYWORDS,
    AnonymizationClassifier,
)

__all__ = [
    "ASN_UNAVAILABLE_REASON",
    "HOSTING_KEYWORDS",
    "KNOWN_VPN_ASNS",
    "TOR_KEYWORDS",
    "VPN_KEYWORDS",
    "AnonymizationClassifier",
]
