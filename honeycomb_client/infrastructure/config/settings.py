"""Client settings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_HOST = "https://api.honeycomb.io"
DEFAULT_API_KEY_ENV = "HONEYCOMB_API_KEY"
# Still honoured when the primary variable is unset
LEGACY_API_KEY_ENV = "HONEYCOMBIO_APIKEY"
DEFAULT_API_ENDPOINT_ENV = "HONEYCOMB_API_ENDPOINT"
DEFAULT_USER_AGENT = "go-honeycombio"


class Settings(BaseSettings):
    """Client settings."""

    api_key: str = Field(
        "",
        validation_alias=AliasChoices(DEFAULT_API_KEY_ENV, LEGACY_API_KEY_ENV),
    )
    api_url: str = Field(
        DEFAULT_API_HOST,
        validation_alias=AliasChoices(DEFAULT_API_ENDPOINT_ENV),
    )
    user_agent: str = DEFAULT_USER_AGENT
    # Log every request and response at debug level
    debug: bool = False

    log_level: str = "INFO"
    log_format: str = "console"

    retry_min_wait_seconds: float = 0.2
    retry_max_wait_seconds: float = 10.0
    retry_max_attempts: int = 15
    # Per attempt
    request_timeout_seconds: float = 30.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="HONEYCOMB_",
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )
