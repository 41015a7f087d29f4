"""
Error classification for configuration loading and task execution.

Missing secrets are never an error: the affected network degrades to
having no signers. Everything below is raised for configuration that is
present but wrong, or for tasks that cannot complete.
"""

from .config_errors import (
    ConfigurationError,
    SecretsFileError,
    ConfigValidationError,
    UnknownNetworkError,
)
from .task_errors import (
    TaskError,
    UnknownTaskError,
    SignerProviderError,
)

__all__ = [
    # Configuration Errors
    "ConfigurationError",
    "SecretsFileError",
    "ConfigValidationError",
    "UnknownNetworkError",
    # Task Errors
    "TaskError",
    "UnknownTaskError",
    "SignerProviderError",
]
