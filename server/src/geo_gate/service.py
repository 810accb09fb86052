"""Access service: wires the lookups, classifier and policy together."""

import logging

from geo_gate.config import Settings
from geo_gate.detection.classifier import AnonymizationClassifier
from geo_gate.exceptions import DatabaseLoadError
from geo_gate.lookup.base import AsnLookup, GeoLookup
from geo_gate.lookup.maxmind import MaxMindAsnLookup, MaxMindCityLookup
from geo_gate.models.decision import AccessDecision, PolicyConfig
from geo_gate.models.health import DatabaseStatus
from geo_gate.policy.evaluator import evaluate, is_loopback

logger = logging.getLogger(__name__)


class AccessService:
    """Produces access decisions for client addresses.

    Owns the lookup collaborators for the lifetime of the service. The ASN
    lookup is optional; without it every address is classified as having
    no ASN data.
    """

    def __init__(
        self,
        geo_lookup: GeoLookup,
        policy: PolicyConfig,
        asn_lookup: AsnLookup | None = None,
        classifier: AnonymizationClassifier | None = None,
    ) -> None:
        self._geo_lookup = geo_lookup
        self._asn_lookup = asn_lookup
        self._policy = policy
        self._classifier = classifier or AnonymizationClassifier()

    @classmethod
    def from_settings(cls, settings: Settings) -> "AccessService":
        """Open the MaxMind databases named in settings.

        The City database is required. A missing ASN database only limits
        VPN detection.

        Raises:
            DatabaseLoadError: If the City database cannot be opened
        """
        geo_lookup = MaxMindCityLookup.open(settings.city_db_path)

        asn_lookup: MaxMindAsnLookup | None = None
        if settings.asn_db_path:
            try:
                asn_lookup = MaxMindAsnLookup.open(settings.asn_db_path)
            except DatabaseLoadError as e:
                logger.warning(f"ASN database not available, VPN detection will be limited: {e}")
        else:
            logger.warning("ASN database disabled, VPN detection will be limited")

        return cls(geo_lookup=geo_lookup, policy=settings.policy(), asn_lookup=asn_lookup)

    @property
    def policy(self) -> PolicyConfig:
        return self._policy

    @property
    def asn_available(self) -> bool:
        """Whether an ASN collaborator is wired in."""
        return self._asn_lookup is not None

    def database_status(self) -> DatabaseStatus:
        return DatabaseStatus(city=True, asn=self.asn_available)

    def check_access(self, ip: str) -> AccessDecision:
        """Decide whether a client address may access the service.

        Args:
            ip: The client address

        Returns:
            The AccessDecision for this address
        """
        logger.info(f"Checking IP: {ip}")

        if is_loopback(ip):
            decision = evaluate(None, None, self._policy, ip)
            logger.info(f"Access denied for {ip}: {decision.error}")
            return decision

        geo = self._geo_lookup.lookup(ip)
        if geo is None:
            decision = evaluate(None, None, self._policy, ip)
            logger.info(f"Access denied for {ip}: {decision.error}")
            return decision

        asn = self._asn_lookup.lookup(ip) if self._asn_lookup else None
        verdict = self._classifier.classify(asn)
        decision = evaluate(geo, verdict, self._policy, ip, asn=asn)

        outcome = "granted" if decision.allowed else "denied"
        suffix = f" - {decision.block_reason.value}" if decision.block_reason else ""
        logger.info(f"Access {outcome} for {ip} ({decision.country}){suffix}")
        return decision

    def close(self) -> None:
        """Close the underlying database readers."""
        for lookup in (self._geo_lookup, self._asn_lookup):
            close = getattr(lookup, "close", None)
            if close is not None:
                close()
