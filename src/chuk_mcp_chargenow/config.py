"""
Runtime settings for chuk-mcp-chargenow.

Settings are read once at startup and passed explicitly to every component.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .constants import ChargeNowConfig, EnvVar, ErrorMessages, GeocodeConfig


class ConfigurationError(RuntimeError):
    """Raised when required configuration is missing."""


@dataclass(frozen=True)
class Settings:
    """Immutable server settings."""

    geocode_api_key: str
    geocode_base_url: str = GeocodeConfig.BASE_URL
    chargenow_api_url: str = ChargeNowConfig.API_URL
    user_agent: str = ChargeNowConfig.USER_AGENT

    def __repr__(self) -> str:
        # Keep the key out of logs
        return (
            f"Settings(geocode_api_key='***', geocode_base_url={self.geocode_base_url!r}, "
            f"chargenow_api_url={self.chargenow_api_url!r})"
        )

    @property
    def has_api_key(self) -> bool:
        return bool(self.geocode_api_key and self.geocode_api_key.strip())

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If GEOCODE_API_KEY is missing or blank
        """
        env = os.environ if environ is None else environ
        api_key = env.get(EnvVar.GEOCODE_API_KEY, "").strip()
        if not api_key:
            raise ConfigurationError(
                ErrorMessages.MISSING_API_KEY_ENV.format(EnvVar.GEOCODE_API_KEY)
            )
        return cls(
            geocode_api_key=api_key,
            geocode_base_url=env.get(EnvVar.GEOCODE_BASE_URL) or GeocodeConfig.BASE_URL,
            chargenow_api_url=env.get(EnvVar.CHARGENOW_API_URL) or ChargeNowConfig.API_URL,
        )
