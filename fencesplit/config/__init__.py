"""Configuration module for fencesplit."""

from fencesplit.config.schema import Config, IdConfig, RetryConfig

_default: Config | None = None


def get_config() -> Config:
    """Return the process-wide default configuration."""
    global _default
    if _default is None:
        _default = Config()
    return _default


def set_config(config: Config) -> None:
    """Replace the process-wide default configuration."""
    global _default
    _default = config


__all__ = ["Config", "IdConfig", "RetryConfig", "get_config", "set_config"]
