"""Global test configuration for Geo Gate."""

import pytest

from geo_gate.models.decision import PolicyConfig
from geo_gate.models.geo import AsnRecord, GeoRecord


class FakeGeoLookup:
    """In-memory geo lookup keyed by address."""

    def __init__(self, records: dict[str, GeoRecord] | None = None) -> None:
        self.records = records or {}
        self.calls: list[str] = []

    def lookup(self, ip_address: str) -> GeoRecord | None:
        self.calls.append(ip_address)
        return self.records.get(ip_address)


class FakeAsnLookup:
    """In-memory ASN lookup keyed by address."""

    def __init__(self, records: dict[str, AsnRecord] | None = None) -> None:
        self.records = records or {}
        self.calls: list[str] = []

    def lookup(self, ip_address: str) -> AsnRecord | None:
        self.calls.append(ip_address)
        return self.records.get(ip_address)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Make every test read settings fresh from the environment."""
    from geo_gate.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def policy() -> PolicyConfig:
    return PolicyConfig(
        allowed_ips=frozenset({"49.206.100.25"}),
        allowed_countries=frozenset({"IN", "MY"}),
    )


@pytest.fixture
def geo_records() -> dict[str, GeoRecord]:
    return {
        "103.21.58.10": GeoRecord(
            country="IN", region="Karnataka", city="Bengaluru",
            latitude=12.9634, longitude=77.5855,
        ),
        "54.239.28.85": GeoRecord(
            country="US", region="Virginia", city="Ashburn",
            latitude=39.0469, longitude=-77.4903,
        ),
        "128.199.100.1": GeoRecord(
            country="MY", region="Kuala Lumpur", city="Kuala Lumpur",
            latitude=3.1412, longitude=101.6865,
        ),
        "49.206.100.25": GeoRecord(
            country="US", region="California", city="San Jose",
            latitude=37.3388, longitude=-121.8916,
        ),
    }


@pytest.fixture
def asn_records() -> dict[str, AsnRecord]:
    return {
        "54.239.28.85": AsnRecord(number=16509, organization="AMAZON-02"),
        "128.199.100.1": AsnRecord(number=64500, organization="DigitalOcean LLC"),
    }


@pytest.fixture
def geo_lookup(geo_records) -> FakeGeoLookup:
    return FakeGeoLookup(geo_records)


@pytest.fixture
def asn_lookup(asn_records) -> FakeAsnLookup:
    return FakeAsnLookup(asn_records)
