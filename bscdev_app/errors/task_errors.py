"""
Task execution error classifications.
"""

from typing import Optional, Dict, Any, List


class TaskError(Exception):
    """Base class for task failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class UnknownTaskError(TaskError):
    """Requested task is not registered."""

    def __init__(self, message: str, task_name: Optional[str] = None,
                 available: Optional[List[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.task_name = task_name
        self.available = available or []


class SignerProviderError(TaskError):
    """Signing identities could not be obtained for a network."""

    def __init__(self, message: str, network: Optional[str] = None,
                 provider: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.network = network
        self.provider = provider
