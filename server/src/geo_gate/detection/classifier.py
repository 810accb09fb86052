"""Anonymization classification from autonomous-system metadata.

Infers whether an address belongs to a VPN, hosting or Tor network using
the ASN number and a set of organization-name keywords.
"""

from collections.abc import Iterable, Sequence

from geo_gate.models.detection import ClassificationVerdict, Confidence
from geo_gate.models.geo import AsnRecord

ASN_UNAVAILABLE_REASON = "ASN data unavailable"

# Networks known to front VPN exits or rented servers
KNOWN_VPN_ASNS: frozenset[int] = frozenset({
    9009,   # M247
    60068,  # CDN77
    24940,  # Hetzner Online
    16509,  # Amazon AWS
    14061,  # DigitalOcean
    63949,  # Linode
    20473,  # Choopa (Vultr)
    21859,  # ZenLayer
    8100,   # QuadraNet
    62240,  # Clouvider
    30633,  # Leaseweb
    36352,  # ColoCrossing
    40676,  # Psychz Networks
    19531,  # PEG TECH INC
    46844,  # Sharktech
})

# Order matters: only the first match in each list is reported.
# Plain substring matching, so "colo" also hits "colorado".
VPN_KEYWORDS: tuple[str, ...] = (
    "vpn",
    "proxy",
    "hosting",
    "datacenter",
    "data center",
    "cloud",
    "virtual",
    "nordvpn",
    "expressvpn",
    "surfshark",
    "protonvpn",
    "mullvad",
    "private internet access",
    "cyberghost",
    "ipvanish",
    "purevpn",
    "windscribe",
    "tunnelbear",
    "hotspot shield",
    "hide.me",
    "m247",
    "colocation",
    "colo",
    "server",
    "dedicated",
)

HOSTING_KEYWORDS: tuple[str, ...] = (
    "amazon",
    "aws",
    "azure",
    "google cloud",
    "gcp",
    "digitalocean",
    "linode",
    "vultr",
    "ovh",
    "hetzner",
    "scaleway",
    "contabo",
    "leaseweb",
    "quadranet",
    "psychz",
    "sharktech",
    "choopa",
    "colocation",
    "datacentre",
    "data centre",
    "infrastructure",
)

TOR_KEYWORDS: tuple[str, ...] = ("tor", "exit node", "exit relay")


def _first_match(text: str, keywords: Sequence[str]) -> str | None:
    """Return the first keyword contained in text, in list order."""
    for keyword in keywords:
        if keyword in text:
            return keyword
    return None


class AnonymizationClassifier:
    """Classifies ASN records for VPN, hosting and Tor usage.

    Four independent checks run on every record: known ASN numbers, VPN
    keywords, hosting keywords and Tor keywords. Within each keyword list
    the first match wins.
    """

    def __init__(
        self,
        known_asns: Iterable[int] = KNOWN_VPN_ASNS,
        vpn_keywords: Sequence[str] = VPN_KEYWORDS,
        hosting_keywords: Sequence[str] = HOSTING_KEYWORDS,
        tor_keywords: Sequence[str] = TOR_KEYWORDS,
    ) -> None:
        """Initialize the classifier.

        Args:
            known_asns: ASN numbers that are always treated as VPN/hosting
            vpn_keywords: Ordered VPN-indicating substrings
            hosting_keywords: Ordered hosting-provider substrings
            tor_keywords: Ordered Tor-indicating substrings
        """
        self._known_asns = frozenset(known_asns)
        self._vpn_keywords = tuple(k.lower() for k in vpn_keywords)
        self._hosting_keywords = tuple(k.lower() for k in hosting_keywords)
        self._tor_keywords = tuple(k.lower() for k in tor_keywords)

    def classify(self, asn: AsnRecord | None) -> ClassificationVerdict:
        """Classify an ASN record.

        Args:
            asn: The ASN record, or None when no ASN data exists

        Returns:
            ClassificationVerdict with flags, confidence and reasons
        """
        if asn is None:
            return ClassificationVerdict(reasons=[ASN_UNAVAILABLE_REASON])

        org_name = (asn.organization or "").strip().lower()

        is_vpn = False
        is_hosting = False
        is_tor = False
        confidence = Confidence.LOW
        reasons: list[str] = []

        if asn.number in self._known_asns:
            is_vpn = True
            is_hosting = True
            confidence = Confidence.HIGH
            reasons.append(f"Known VPN/hosting ASN: {asn.number}")

        keyword = _first_match(org_name, self._vpn_keywords)
        if keyword is not None:
            is_vpn = True
            confidence = Confidence.HIGH
            reasons.append(f"VPN keyword detected: {keyword}")

        keyword = _first_match(org_name, self._hosting_keywords)
        if keyword is not None:
            is_hosting = True
            # Never downgrade a high-confidence VPN signal
            if not is_vpn:
                confidence = Confidence.MEDIUM
            reasons.append(f"Hosting provider detected: {keyword}")

        if _first_match(org_name, self._tor_keywords) is not None:
            is_tor = True
            confidence = Confidence.HIGH
            reasons.append("Tor exit node detected")

        return ClassificationVerdict(
            is_vpn=is_vpn,
            is_hosting=is_hosting,
            is_tor=is_tor,
            confidence=confidence,
            reasons=reasons,
        )

    def is_anonymized(self, asn: AsnRecord | None) -> bool:
        """Quick check if an ASN record looks like an anonymizing network."""
        return self.classify(asn).is_proxy
