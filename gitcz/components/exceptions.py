"""Exceptions raised by interactive components.

Contains:
- QuitRequested: Raised when the user asks to end the session
- InvalidConfigurationError: Raised when a component is built with bad settings
"""


class QuitRequested(Exception):
    """Raised when a quit key is pressed; ends the whole session."""

    pass


class InvalidConfigurationError(ValueError):
    """Raised when a component is constructed with invalid settings."""

    pass
