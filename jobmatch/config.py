"""
Configuration management for Job Match Assistant.
"""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # LLM
    gemini_api_key: str = Field(default="", validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"))
    gemini_model: str = "gemini-2.5-flash"
    analysis_temperature: float = 0.3

    # Database (optional: resume endpoints answer 503 without it)
    database_url: str = ""

    # Upstream services
    upstream_timeout: float = 60.0
    hiring_cafe_url: str = "https://hiring.cafe/api/v1/jobs"
    hiring_cafe_cache_ttl: int = 300

    # HTTP surface
    cors_origins: str = "http://localhost:5173"
    port: int = 3001

    # Client side
    api_base_url: str = "http://localhost:3001/api"
    local_store_path: Path = Path.home() / ".jobmatch" / "saved_resumes.json"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()
