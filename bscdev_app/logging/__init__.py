"""
Logging configuration and utilities for bscdev.
"""
from .config import configure_logging, get_logger, get_task_logger

__all__ = ["configure_logging", "get_logger", "get_task_logger"]
