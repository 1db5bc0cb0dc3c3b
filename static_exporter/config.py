from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file into environment BEFORE any settings classes are instantiated
load_dotenv()


class ServerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EXPORTER_")

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=9100, ge=1, le=65535, description="Port to bind")
    metrics_path: str = Field(default="/metrics", description="Route serving the exposition")

    @field_validator("metrics_path")
    @classmethod
    def check_metrics_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("metrics_path must start with '/'")
        if len(value) > 1 and value.endswith("/"):
            raise ValueError("metrics_path must not end with '/'")
        return value


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(default="INFO", description="Log level: DEBUG|INFO|WARNING|ERROR")
    format: str = Field(default="json", description="json|console")

    @field_validator("format")
    @classmethod
    def check_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "console"):
            raise ValueError("format must be 'json' or 'console'")
        return value


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Nested settings read their own prefixed variables
    )

    environment: str = Field(default="development", description="development|staging|production|test")

    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


settings = Settings()
