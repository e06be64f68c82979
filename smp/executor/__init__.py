"""
Command executors.

This module exposes the executor classes and a small factory so the CLI can
select a backend by name.
"""

from __future__ import annotations

from .base import CommandExecutable
from .errors import CommandFailure, CommandTimeout, ProcessLaunchError, SmpError
from .local import CommandExecutor
from .mock import MockCommandExecutor
from .result import ExecutionResult

__all__ = [
    "CommandExecutable",
    "CommandExecutor",
    "MockCommandExecutor",
    "ExecutionResult",
    "SmpError",
    "ProcessLaunchError",
    "CommandFailure",
    "CommandTimeout",
    "load_executor",
]


def load_executor(name: str, **kwargs) -> CommandExecutable:
    key = (name or "").strip().lower()
    if key == "local":
        return CommandExecutor(**kwargs)
    if key == "mock":
        return MockCommandExecutor()
    raise ValueError(f"Unknown executor backend: {name}")
