"""Geo Gate - geographic and anonymization-aware access decisions."""

__version__ = "0.1.0"

from geo_gate.exceptions import DatabaseLoadError, GeoGateError

__all__ = ["__version__", "DatabaseLoadError", "GeoGateError"]
