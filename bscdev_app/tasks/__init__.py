"""
Task runner module.

Named async tasks that run against a resolved project configuration.
Importing this package registers the built-in tasks.
"""
from .registry import Task, TaskContext, TaskRegistry, default_registry, run_task, task
from . import builtin  # noqa: F401

__all__ = ["Task", "TaskContext", "TaskRegistry", "default_registry", "run_task", "task"]
