"""Configuration and environment loading for Geo Gate."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from geo_gate.models.decision import PolicyConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # MaxMind databases
    city_db_path: str = "GeoLite2-City.mmdb"
    asn_db_path: str = "GeoLite2-ASN.mmdb"  # Empty string disables VPN detection

    # Access policy (JSON lists in the environment)
    allowed_ips: set[str] = {"49.206.100.25"}
    allowed_countries: set[str] = {"IN", "MY"}

    # Take the client address from X-Forwarded-For (behind a proxy)
    trust_forwarded_for: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False

    def policy(self) -> PolicyConfig:
        """Build the read-only access policy."""
        return PolicyConfig(
            allowed_ips=frozenset(self.allowed_ips),
            allowed_countries=frozenset(c.upper() for c in self.allowed_countries),
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
