"""Configuration module for jwl."""

from dotenv import load_dotenv

from .manager import (
    AppSettings,
    Config,
    ConfigError,
    ConfigManager,
    ConfigNotFound,
    Context,
    ContextNotFound,
    InvalidConfig,
    NoContextNameGiven,
)

load_dotenv()

# Global config manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


__all__ = [
    "AppSettings",
    "Config",
    "ConfigError",
    "ConfigManager",
    "ConfigNotFound",
    "Context",
    "ContextNotFound",
    "InvalidConfig",
    "NoContextNameGiven",
    "get_config_manager",
]
