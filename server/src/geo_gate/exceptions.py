"""Custom exceptions for Geo Gate."""


class GeoGateError(Exception):
    """Base class for Geo Gate errors."""


class DatabaseLoadError(GeoGateError):
    """Raised when a MaxMind database cannot be opened."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load GeoIP database {path}: {reason}")
