"""
Configuration settings for Quotebook.

Uses Pydantic Settings to load environment variables for logging, sample data
generation and the concurrent-writer benchmark.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Sample data
    sample_size: int = Field(50, alias="SAMPLE_SIZE")
    sample_seed: int = Field(42, alias="SAMPLE_SEED")

    # Aggregations
    popular_tags_limit: int = Field(5, alias="POPULAR_TAGS_LIMIT")

    # Benchmark defaults
    bench_workers: int = Field(8, alias="BENCH_WORKERS")
    bench_per_worker: int = Field(1_000, alias="BENCH_PER_WORKER")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
