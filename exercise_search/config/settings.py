"""Application settings and configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "exercises.json"


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application
    app_name: str = Field(default="Exercise Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    
    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)
    
    # Catalog
    catalog_path: Path = Field(default=DEFAULT_CATALOG_PATH)
    
    # Search Configuration
    max_results: int = Field(default=50)
    max_query_length: int = Field(default=100)
    suggestion_cutoff: float = Field(default=60.0)  # rapidfuzz WRatio, 0-100
    max_suggestions: int = Field(default=5)
    
    # Logging
    log_level: str = Field(default="INFO")
    
    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"]
    )
    
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
