import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    log_level: str = "INFO"
    perf_logging: bool = False
    seed_catalog: bool = True
    benchmark_lookups: int = 1000
    benchmark_comments: int = 100
    benchmark_query: str = "c++"
    menu_title: str = "MyTube"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MYTUBE_", env_file_encoding="utf-8")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

@lru_cache

def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()


settings = get_settings()
