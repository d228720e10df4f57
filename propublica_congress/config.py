from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from propublica_congress.validators import CURRENT_CONGRESS


class Settings(BaseSettings):
    # Core Settings
    api_key: str | None = Field(None, description="ProPublica Congress API key")
    current_congress: int = Field(
        CURRENT_CONGRESS, description="Most recent congress; also the default for congress-scoped calls"
    )
    host: str = Field("https://api.propublica.org", description="API origin")
    api_version: str = Field("1", description="Congress API version (the N in /congress/vN)")
    strict_results: bool = Field(True, description="Reject responses with more than one result")

    # Transport Settings
    timeout_seconds: float = Field(30.0, description="HTTP timeout in seconds")
    max_attempts: int = Field(1, description="Attempts per request; 1 disables retries")

    # Logging Settings
    log_level: str = Field("INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(False, description="Emit JSON log lines")

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PROPUBLICA_", extra="ignore")

    def validate_api_key(self) -> None:
        """Validate that API key is provided"""
        if not self.api_key:
            raise ValueError("PROPUBLICA_API_KEY is required. Set it via environment variable or .env file.")


settings = Settings()
