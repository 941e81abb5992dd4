"""Client configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when the client is missing a required dependency."""


class ClientConfig(BaseSettings):
    """Prism node client configuration.

    Values not passed explicitly are loaded from the environment, e.g.
    PRISM_BASE_URL and PRISM_DEFAULT_LEDGER.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRISM_", env_file=".env", extra="ignore", frozen=True
    )

    base_url: str = ""
    default_ledger: str | None = None
