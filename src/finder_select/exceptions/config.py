"""Configuration exceptions: settings files and environment values."""

from .base import FinderSelectError


class ConfigurationError(FinderSelectError):
    """Raised when configuration files or values are invalid."""

    pass
