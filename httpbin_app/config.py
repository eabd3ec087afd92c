"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single default instance per process
    - Pacing tunables live on a Settings instance, never in module globals

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Tunables travel with the app (app.state.settings) so two apps in one
      process can use different delay ceilings / stream intervals
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from HTTPBIN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HTTPBIN_", env_file=".env", case_sensitive=False,
    )

    # Server
    listen: str = ":8080"

    # Pacing tunables
    delay_max_seconds: float = 10.0
    stream_interval_seconds: float = 1.0
    binary_chunk_size: int = 64 * 1024

    @field_validator("binary_chunk_size")
    @classmethod
    def chunk_size_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("binary_chunk_size must be positive")
        return v

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def listen_address(self) -> tuple[str, int]:
        """Split `listen` into (host, port). Empty host binds all interfaces.

        A bracketed IPv6 host ("[::1]:8080") is passed on without brackets.
        """
        host, _, port = self.listen.rpartition(":")
        if host.startswith("[") and host.endswith("]"):
            host = host[1:-1]
        return host or "0.0.0.0", int(port)


@lru_cache
def get_settings() -> Settings:
    return Settings()
