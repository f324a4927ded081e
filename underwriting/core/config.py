"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking
    max_chunk_size: int = 4000  # characters per chunk, keeps prompts under token limits

    # Uploads
    max_file_size: int = 20 * 1024 * 1024  # 20MB

    # Summaries / prompt building
    prompt_document_max_chars: int = 8000

    # Byte source
    fetch_timeout: int = 30

    # Scanned document heuristic
    scanned_chars_per_page_threshold: int = 100
    scanned_sample_pages: int = 3

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False


@lru_cache
def get_config() -> Config:
    """Get cached configuration instance."""
    return Config()
