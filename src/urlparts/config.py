"""
Configuration management for urlparts.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PSLConfig(BaseSettings):
    """Configuration for Public Suffix List loading."""

    path: Optional[Path] = Field(
        default=None,
        description=(
            "PSL file to load (plain text or .zst). "
            "None uses the list bundled with publicsuffixlist."
        ),
    )
    include_private: bool = Field(
        default=True, description="Keep rules from the PRIVATE DOMAINS section"
    )
    cache_compression_level: int = Field(
        default=19, description="Zstd level for cached PSL copies (1-22)"
    )

    model_config = SettingsConfigDict(env_prefix="PSL_")


class BatchConfig(BaseSettings):
    """Configuration for batch decomposition."""

    url_column: str = Field(default="url", description="Input column holding URLs")
    domain_prefix_chars: int = Field(
        default=2, description="Number of hex chars for registrable domain prefixes"
    )

    model_config = SettingsConfigDict(env_prefix="BATCH_")


class ApiConfig(BaseSettings):
    """Configuration for the HTTP surface."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")
    max_url_length: int = Field(
        default=8192, description="Longest URL accepted by the parse endpoints"
    )

    model_config = SettingsConfigDict(env_prefix="API_")


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    psl: PSLConfig = Field(default_factory=PSLConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    # Global settings
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_nested_delimiter="__"
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
