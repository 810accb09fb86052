"""MaxMind GeoLite2 readers for city and ASN lookups."""

import logging

import geoip2.database
import maxminddb
from geoip2.errors import AddressNotFoundError

from geo_gate.exceptions import DatabaseLoadError
from geo_gate.models.geo import UNKNOWN, AsnRecord, GeoRecord

logger = logging.getLogger(__name__)


def open_reader(path: str) -> geoip2.database.Reader:
    """Open a MaxMind database.

    Raises:
        DatabaseLoadError: If the file is missing or not a valid database
    """
    try:
        return geoip2.database.Reader(path)
    except (OSError, maxminddb.InvalidDatabaseError) as e:
        raise DatabaseLoadError(path, str(e)) from e


class MaxMindCityLookup:
    """GeoLite2-City backed geo lookup."""

    def __init__(self, reader: geoip2.database.Reader) -> None:
        self._reader = reader

    @classmethod
    def open(cls, path: str) -> "MaxMindCityLookup":
        lookup = cls(open_reader(path))
        logger.info(f"GeoIP City database loaded from {path}")
        return lookup

    def lookup(self, ip_address: str) -> GeoRecord | None:
        try:
            response = self._reader.city(ip_address)
        except AddressNotFoundError:
            return None

        region = UNKNOWN
        if response.subdivisions:
            region = response.subdivisions[0].names.get("en") or UNKNOWN

        return GeoRecord(
            country=response.country.iso_code or UNKNOWN,
            region=region,
            city=response.city.names.get("en") or UNKNOWN,
            latitude=response.location.latitude,
            longitude=response.location.longitude,
        )

    def close(self) -> None:
        self._reader.close()


class MaxMindAsnLookup:
    """GeoLite2-ASN backed lookup.

    Reader failures for a single address are logged and reported as a
    missing record, so detection degrades instead of failing the request.
    """

    def __init__(self, reader: geoip2.database.Reader) -> None:
        self._reader = reader

    @classmethod
    def open(cls, path: str) -> "MaxMindAsnLookup":
        lookup = cls(open_reader(path))
        logger.info(f"GeoIP ASN database loaded from {path}")
        return lookup

    def lookup(self, ip_address: str) -> AsnRecord | None:
        try:
            response = self._reader.asn(ip_address)
        except AddressNotFoundError:
            return None
        except maxminddb.InvalidDatabaseError as e:
            logger.warning(f"ASN lookup failed for {ip_address}: {e}")
            return None

        if response.autonomous_system_number is None:
            return None

        return AsnRecord(
            number=response.autonomous_system_number,
            organization=response.autonomous_system_organization or "",
        )

    def close(self) -> None:
        self._reader.close()
