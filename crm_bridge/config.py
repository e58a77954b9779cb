"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Credentials and base URL come from environment variables (never hardcoded)
    - Missing/blank credentials are a startup failure (ConfigurationError), never a per-call error
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings
"""

from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from crm_bridge.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # CRM credentials (Basic auth)
    crm_base_url: str
    crm_username: str
    crm_password: str
    crm_timeout_seconds: float = 30.0

    @field_validator("crm_base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        """Paths are joined as base + '/subscribers', so drop the trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("crm_username", "crm_password")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    # MCP server identity
    server_name: str = "crm-bridge"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_settings() -> Settings:
    """get_settings() with pydantic failures mapped to ConfigurationError."""
    try:
        return get_settings()
    except ValidationError as e:
        fields = [
            ".".join(str(loc) for loc in err["loc"]).upper()
            for err in e.errors()
        ]
        raise ConfigurationError(
            f"Invalid or missing configuration: {', '.join(fields)}",
            fields=fields,
        ) from e
