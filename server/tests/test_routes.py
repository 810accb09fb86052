"""Tests for the HTTP routes."""

from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request

from geo_gate import __version__
from geo_gate.api import routes
from geo_gate.api.routes import get_client_ip
from geo_gate.service import AccessService


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset module-level singletons between tests."""
    routes._access_service = None
    yield
    routes._access_service = None


@pytest.fixture
def service(geo_lookup, asn_lookup, policy) -> AccessService:
    service = AccessService(geo_lookup=geo_lookup, policy=policy, asn_lookup=asn_lookup)
    routes._access_service = service
    return service


async def _get(path: str, headers: dict[str, str] | None = None):
    from geo_gate.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.get(path, headers=headers)


def _request(headers: dict[str, str] | None = None, client_host: str = "10.1.2.3") -> Request:
    raw_headers = [
        (name.lower().encode(), value.encode())
        for name, value in (headers or {}).items()
    ]
    return Request({
        "type": "http",
        "method": "GET",
        "path": "/check-access",
        "headers": raw_headers,
        "client": (client_host, 54321),
    })


# ---------------------------------------------------------------------------
# TestGetClientIp
# ---------------------------------------------------------------------------

class TestGetClientIp:
    """Tests for client address extraction."""

    def test_first_forwarded_entry(self):
        request = _request({"X-Forwarded-For": " 103.21.58.10 , 10.0.0.1"})
        assert get_client_ip(request) == "103.21.58.10"

    def test_peer_address_without_header(self):
        assert get_client_ip(_request()) == "10.1.2.3"

    def test_strips_ipv4_mapped_prefix(self):
        request = _request(client_host="::ffff:103.21.58.10")
        assert get_client_ip(request) == "103.21.58.10"

    def test_untrusted_header_ignored(self):
        request = _request({"X-Forwarded-For": "103.21.58.10"}, client_host="10.1.2.3")
        assert get_client_ip(request, trust_forwarded_for=False) == "10.1.2.3"


# ---------------------------------------------------------------------------
# TestCheckAccessEndpoint
# ---------------------------------------------------------------------------

class TestCheckAccessEndpoint:
    """Tests for GET /check-access."""

    @pytest.mark.asyncio
    async def test_allowed_response(self, service):
        resp = await _get("/check-access", {"X-Forwarded-For": "103.21.58.10"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["allowed"] is True
        assert data["blockReason"] is None
        assert data["ip"] == "103.21.58.10"
        assert data["country"] == "IN"
        assert data["region"] == "Karnataka"
        assert data["city"] == "Bengaluru"
        assert data["asn"] is None
        assert data["organization"] == "Unknown"
        assert data["vpnDetection"]["reasons"] == ["ASN data unavailable"]
        assert data["vpnDetection"]["isProxy"] is False

    @pytest.mark.asyncio
    async def test_geographic_block(self, service):
        resp = await _get("/check-access", {"X-Forwarded-For": "54.239.28.85"})

        data = resp.json()
        assert data["allowed"] is False
        assert data["blockReason"] == "Geographic restriction"
        assert data["asn"] == 16509
        assert data["vpnDetection"]["isVpn"] is True
        assert data["vpnDetection"]["confidence"] == "high"

    @pytest.mark.asyncio
    async def test_vpn_block(self, service):
        resp = await _get("/check-access", {"X-Forwarded-For": "128.199.100.1"})

        data = resp.json()
        assert data["allowed"] is False
        assert data["blockReason"] == "VPN/Proxy detected"
        assert data["organization"] == "DigitalOcean LLC"
        assert data["vpnDetection"]["isHosting"] is True

    @pytest.mark.asyncio
    async def test_not_in_database(self, service):
        resp = await _get("/check-access", {"X-Forwarded-For": "203.0.113.9"})

        data = resp.json()
        assert data["allowed"] is False
        assert data["country"] == "Unknown"
        assert data["latitude"] is None
        assert data["longitude"] is None
        assert data["error"] == "IP not found in database"

    @pytest.mark.asyncio
    async def test_loopback_peer(self, service):
        # ASGITransport reports the peer as 127.0.0.1
        resp = await _get("/check-access")

        data = resp.json()
        assert resp.status_code == 200
        assert data["allowed"] is False
        assert data["ip"] == "127.0.0.1"
        assert data["error"] == "Localhost IP cannot be geolocated"

    @pytest.mark.asyncio
    async def test_lookup_failure_returns_500(self):
        broken = MagicMock()
        broken.check_access.side_effect = RuntimeError("corrupt database")
        routes._access_service = broken

        resp = await _get("/check-access", {"X-Forwarded-For": "103.21.58.10"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Geolocation error"}


# ---------------------------------------------------------------------------
# TestHealthEndpoint
# ---------------------------------------------------------------------------

class TestHealthEndpoint:
    """Tests for GET /health."""

    @pytest.mark.asyncio
    async def test_reports_databases(self, service):
        resp = await _get("/health")

        assert resp.status_code == 200
        assert resp.json() == {
            "status": "ok",
            "version": __version__,
            "databases": {"city": True, "asn": True},
        }

    @pytest.mark.asyncio
    async def test_without_asn(self, geo_lookup, policy):
        routes._access_service = AccessService(geo_lookup=geo_lookup, policy=policy)

        resp = await _get("/health")

        assert resp.json()["databases"] == {"city": True, "asn": False}

    @pytest.mark.asyncio
    async def test_before_startup(self):
        resp = await _get("/health")

        assert resp.json()["databases"] == {"city": False, "asn": False}
