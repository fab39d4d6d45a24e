from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    node_env: str = "development"
    log_level: str = "INFO"

    # Database (optional, presence gates the health-check probe)
    database_url: str | None = None
    database_probe_timeout: float = Field(default=3.0, gt=0)

    # Third-party integrations, only presence is ever reported
    twilio_account_sid: str | None = None
    openai_api_key: str | None = None

    # App
    app_name: str = "AI Survey System"
    version: str = "1.0.0"

    @property
    def twilio_configured(self) -> bool:
        return bool(self.twilio_account_sid)

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)


def load_settings() -> Settings:
    """Build a fresh ``Settings`` from the current environment."""
    return Settings()
