"""Server configuration via Pydantic settings, fixed to built-in defaults."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from htmx_prototype.paths import TEMPLATES_DIR


class Settings(BaseSettings):
    """Listener and runtime configuration.

    Only explicit constructor arguments are honoured; environment variables,
    dotenv files and secrets directories are never read.
    """

    host: str = "127.0.0.1"
    port: int = 8888
    # uvicorn has no per-connection read/write timeouts; these are the
    # keep-alive idle timeout and the graceful-shutdown grace period.
    keep_alive_timeout_seconds: int = 10
    graceful_shutdown_timeout_seconds: int = 30
    max_header_bytes: int = 1 << 20
    templates_dir: Path = TEMPLATES_DIR
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = {
        "extra": "ignore",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
