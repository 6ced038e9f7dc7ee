"""Configuration exception classes."""


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded or is invalid."""

    pass
