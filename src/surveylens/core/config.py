"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_config_dir() -> Path:
    """Find the config directory by walking up from the package location.

    Looks for a 'config/' directory next to the project root.
    Falls back to relative Path("config") if not found.
    """
    # config.py -> core/ -> surveylens/ -> src/ -> root/
    package_dir = Path(__file__).resolve().parent.parent.parent.parent
    candidate = package_dir / "config"
    if candidate.is_dir():
        return candidate

    return Path("config")


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: SURVEYLENS_
    """

    model_config = SettingsConfigDict(
        env_prefix="SURVEYLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database (SQLAlchemy)
    database_url: str = Field(
        default="sqlite:///./surveylens.db",
        description="SQLAlchemy database URL for stored survey responses",
    )

    # Configuration paths
    config_path: Path = Field(
        default_factory=_find_config_dir,
        description="Path to configuration files (question catalog)",
    )
    questions_file: str = Field(
        default="questions.yaml",
        description="Question catalog file name inside config_path",
    )

    # Correlation ranking
    top_k: int = Field(
        default=5,
        ge=1,
        description="Number of strongest correlations returned to callers",
    )

    # Presentation notices
    min_meaningful_sample: int = Field(
        default=5,
        ge=1,
        description="Below this many paired answers a correlation is flagged as insufficient",
    )
    small_sample_threshold: int = Field(
        default=10,
        ge=1,
        description="Below this many paired answers a correlation is flagged as a small sample",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")  # 'json' or 'console'

    @property
    def questions_path(self) -> Path:
        """Full path to the question catalog YAML."""
        return self.config_path / self.questions_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
