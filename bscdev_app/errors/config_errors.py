"""
Configuration error classifications.

These exceptions are raised while reading secrets or project files and
while resolving the project configuration.
"""

from typing import Optional, Dict, Any, List


class ConfigurationError(Exception):
    """Base class for configuration failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class SecretsFileError(ConfigurationError):
    """Secrets file exists but cannot be read or has the wrong shape."""

    def __init__(self, message: str, path: Optional[str] = None,
                 key: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
        self.key = key


class ConfigValidationError(ConfigurationError):
    """Merged configuration failed schema validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class UnknownNetworkError(ConfigurationError):
    """Requested network is not declared in the configuration."""

    def __init__(self, message: str, network: Optional[str] = None,
                 available: Optional[List[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.network = network
        self.available = available or []
