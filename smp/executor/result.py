# smp/executor/result.py
"""
Value type returned by every command execution.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionResult:
    """
    Result from a single command execution.

    Attributes:
        output: Standard output, stripped of surrounding whitespace.
        error: Standard error, stripped of surrounding whitespace.
        exit_code: Termination status of the process (0 means success).
            A process killed by signal N reports -N, as `subprocess` does.
    """
    output: str
    error: str
    exit_code: int

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0
