"""
In-memory executor for tests.

`MockCommandExecutor` never spawns a process. It returns queued results in
order and records every command it was asked to run. It keeps plain lists with
no locking: use it from a single thread only.
"""

from __future__ import annotations

from typing import List, Optional

from .base import CommandExecutable
from .result import ExecutionResult


class MockCommandExecutor(CommandExecutable):
    def __init__(self) -> None:
        self.executed_commands: List[str] = []
        self.return_results: List[ExecutionResult] = []

    def execute(
        self,
        command: str,
        shell: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> ExecutionResult:
        self.executed_commands.append(command)
        if self.return_results:
            return self.return_results.pop(0)
        return ExecutionResult(output=f"Mock output for: {command}", error="", exit_code=0)

    def set_next_result(self, output: str, error: str = "", exit_code: int = 0) -> None:
        """Queue a result for a later `execute` call."""
        self.return_results.append(ExecutionResult(output=output, error=error, exit_code=exit_code))
