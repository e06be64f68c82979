"""
Abstract interface for anything that can execute a shell command.

Implementations subclass `CommandExecutable` and provide `execute`, which runs
a command through a shell and returns an `ExecutionResult`. Callers hold a
reference typed to this interface, so tests can substitute an in-memory
executor for the real one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .result import ExecutionResult


class CommandExecutable(ABC):
    """
    Abstract base class for command executors.
    """

    @abstractmethod
    def execute(
        self,
        command: str,
        shell: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> ExecutionResult:
        """
        Execute a shell command and wait for it to finish.

        Args:
            command: The shell command to execute.
            shell: Interpreter to run it with (`<shell> -c <command>`).
                None selects the implementation's default shell.
            timeout: Optional timeout in seconds. None waits indefinitely.

        Returns:
            The captured output, error text and exit code.
        """
        raise NotImplementedError

    async def execute_async(
        self,
        command: str,
        shell: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> ExecutionResult:
        """
        Coroutine form of `execute`.

        The default runs `execute` inline on the event loop, so an
        implementation only has to provide the synchronous method.
        """
        return self.execute(command, shell=shell, timeout=timeout)
