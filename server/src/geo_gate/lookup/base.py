"""Lookup protocols for the geo and ASN collaborators."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from geo_gate.models.geo import AsnRecord, GeoRecord


@runtime_checkable
class GeoLookup(Protocol):
    """Resolves an address to its location.

    Returns None when the address is not in the database.
    """

    def lookup(self, ip_address: str) -> GeoRecord | None: ...


@runtime_checkable
class AsnLookup(Protocol):
    """Resolves an address to the autonomous system announcing it.

    Returns None when the address is not in the database.
    """

    def lookup(self, ip_address: str) -> AsnRecord | None: ...
