"""Sueta services configuration via pydantic-settings."""

from functools import lru_cache
from typing import Optional, Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # HTTP server
    HTTP_HOST: str = "0.0.0.0"
    HTTP_PORT: int = 8080
    HTTP_READ_TIMEOUT: int = 20  # seconds
    HTTP_WRITE_TIMEOUT: int = 20  # seconds
    HTTP_MAX_HEADER_BYTES: int = 1  # MiB
    HTTP_SHUTDOWN_TIMEOUT: int = 5  # seconds

    # MongoDB
    MONGO_URL: str = "mongodb://localhost:27017"
    MONGO_DATABASE: str = "sueta"
    MONGO_COLLECTION: str = "users"
    MONGO_POSTS_COLLECTION: str = "posts"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # The YAML file sits below the environment so deployments can override it.
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @classmethod
    def from_file(cls, config_path: str) -> "Settings":
        """Build settings with ``config_path`` as the YAML layer."""

        class FileSettings(cls):
            model_config = SettingsConfigDict(yaml_file=config_path)

        return FileSettings()

    @property
    def request_timeout(self) -> float:
        """Upper bound for the storage work done on behalf of one request."""
        return float(self.HTTP_WRITE_TIMEOUT)

    @property
    def max_header_bytes(self) -> int:
        return self.HTTP_MAX_HEADER_BYTES << 20


@lru_cache
def get_settings(config_path: Optional[str] = None) -> Settings:
    if config_path is None:
        return Settings()
    return Settings.from_file(config_path)
