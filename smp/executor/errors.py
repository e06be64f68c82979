# smp/executor/errors.py
"""
Error types raised around command execution.

A non-zero exit code is never an error at the executor level; only callers
that decide a command has failed (such as the retry processor) raise
`CommandFailure`.
"""

from __future__ import annotations

from typing import Optional

__all__ = ["SmpError", "ProcessLaunchError", "CommandFailure", "CommandTimeout"]


class SmpError(Exception):
    """Base exception for all smp errors."""
    pass


class ProcessLaunchError(SmpError):
    """
    Raised when the shell interpreter cannot be started.

    Attributes:
        shell: Path of the interpreter that failed to launch
        command: The command that was to be run
    """
    def __init__(self, shell: str, command: str, reason: str):
        self.shell = shell
        self.command = command
        super().__init__(f"Could not launch shell '{shell}': {reason}")


class CommandFailure(SmpError):
    """
    Raised when a command finished with a non-zero exit code and the caller
    treats that as a failure.

    Attributes:
        command: The command that failed
        exit_code: The non-zero exit code
        stderr: Standard error output from the command
    """
    def __init__(self, command: str, exit_code: int, stderr: str):
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(f"Command '{command}' failed with exit code {exit_code}: {stderr}")


class CommandTimeout(SmpError):
    """Raised when a command does not finish within its timeout."""
    def __init__(self, command: str, timeout: Optional[float]):
        self.command = command
        self.timeout = timeout
        super().__init__(f"Command '{command}' timed out after {timeout} seconds")
