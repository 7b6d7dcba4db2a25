from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =======================
# R2 Storage Settings
# =======================
class R2Settings(BaseModel):
    """Object store proxy settings."""
    base_url: str = "http://localhost:8787"
    public_base_url: str = "http://localhost:8787/public"
    secret: str = ""
    # Applied to the transport; the client itself never times out
    timeout_seconds: float = 30.0

    @field_validator("base_url", "public_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


# =======================
# Logging Settings
# =======================
class LoggingSettings(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# =======================
# Main Settings
# =======================
class Settings(BaseSettings):
    """Gateway settings."""
    title: str = "R2 Gateway"
    version: str = "1.0.0"
    description: str = "Key-based access to the R2 object store"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        env_file_encoding="utf-8",
        env_nested_delimiter="_",
        env_nested_max_split=1,
        case_sensitive=False,
        extra="ignore",
    )

    r2: R2Settings = R2Settings()
    logging: LoggingSettings = LoggingSettings()


settings = Settings()
