"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    # Use ~/Documents/Lazy Rebalancer as default
    return Path.home() / "Documents" / "Lazy Rebalancer"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Lazy Rebalancer"
    app_version: str = "0.1.0"

    # Data directory (targets and portfolio files live here)
    data_dir: Optional[Path] = None

    # File paths (derived from data_dir if not set explicitly)
    targets_path: Optional[Path] = None
    portfolio_path: Optional[Path] = None

    # Column of the holdings file that carries the "$" value
    portfolio_value_index: int = 1

    log_level: str = "INFO"

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_targets_path(self) -> Path:
        """Get the target allocations CSV path."""
        if self.targets_path:
            return self.targets_path
        return self.get_data_dir() / "targets.csv"

    def get_portfolio_path(self) -> Path:
        """Get the holdings snapshot CSV path."""
        if self.portfolio_path:
            return self.portfolio_path
        return self.get_data_dir() / "portfolio.csv"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
