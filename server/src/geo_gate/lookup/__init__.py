"""Geo and ASN lookup collaborators."""

from geo_gate.lookup.base import AsnLookup, GeoLookup
from geo_gate.lookup.maxmind import MaxMindAsnLookup, MaxMindCityLookup, open_reader

__all__ = [
    "AsnLookup",
    "GeoLookup",
    "MaxMindAsnLookup",
    "MaxMindCityLookup",
    "open_reader",
]
