"""Target environment and credential loading using pydantic-settings."""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from wyre.exceptions import ConfigErrorKind, ConfigurationError, EnvironmentParseError

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """See https://docs.sendwyre.com/docs/productiontest-environments"""

    # TestNet for crypto, Plaid sandbox and fake PII
    TEST = "test"
    # Live funds, accounts and integrations
    PRODUCTION = "production"

    @property
    def api_url(self) -> str:
        """The base url used to access the API."""
        return _API_URLS[self]

    @classmethod
    def parse(cls, value: str) -> "Environment":
        """Parse an environment name, accepting common aliases.

        Raises:
            EnvironmentParseError: the name matches no environment
        """
        normalized = value.lower().strip()
        if normalized in ("dev", "development", "test"):
            return cls.TEST
        if normalized in ("prod", "production"):
            return cls.PRODUCTION
        raise EnvironmentParseError(normalized)


_API_URLS: dict[Environment, str] = {
    Environment.TEST: "https://api.testwyre.com",
    Environment.PRODUCTION: "https://api.sendwyre.com",
}


class WyreSettings(BaseSettings):
    """Credentials read from environment variables (or a .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    WYRE_API_KEY: Optional[SecretStr] = None
    WYRE_API_SECRET: Optional[SecretStr] = None
    WYRE_ENVIRONMENT: Optional[str] = None


class ClientConfig(BaseModel):
    """Everything needed to build a client."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    api_secret: SecretStr
    environment: Environment


def load_config(settings: Optional[WyreSettings] = None) -> ClientConfig:
    """Build a client configuration from ``WYRE_API_KEY``, ``WYRE_API_SECRET``
    and ``WYRE_ENVIRONMENT``.

    Args:
        settings: Pre-loaded settings; read from the process environment when omitted

    Returns:
        Client configuration

    Raises:
        ConfigurationError: a variable is missing or the environment is unknown
    """
    if settings is None:
        settings = WyreSettings()

    if settings.WYRE_API_KEY is None:
        raise ConfigurationError(ConfigErrorKind.MISSING_API_KEY, "WYRE_API_KEY is not set")
    if settings.WYRE_API_SECRET is None:
        raise ConfigurationError(ConfigErrorKind.MISSING_API_SECRET, "WYRE_API_SECRET is not set")
    if settings.WYRE_ENVIRONMENT is None:
        raise ConfigurationError(
            ConfigErrorKind.MISSING_ENVIRONMENT, "WYRE_ENVIRONMENT is not set"
        )

    try:
        environment = Environment.parse(settings.WYRE_ENVIRONMENT)
    except EnvironmentParseError as exc:
        raise ConfigurationError(ConfigErrorKind.ENVIRONMENT_PARSE_ERROR, str(exc)) from exc

    logger.info(f"Loaded Wyre credentials for the {environment.value} environment")
    return ClientConfig(
        api_key=settings.WYRE_API_KEY,
        api_secret=settings.WYRE_API_SECRET,
        environment=environment,
    )
