# smp/processing/retry.py
"""
Retry-on-failure composition over a command executor.

`CommandProcessor` depends only on the `CommandExecutable` interface, so the
same logic runs against the local executor or an in-memory mock.
"""

from __future__ import annotations

from typing import Optional

from smp.executor.base import CommandExecutable
from smp.executor.errors import CommandFailure
from smp.utils.config import DEFAULT_MAX_RETRIES
from smp.utils.logging import get_logger


class CommandProcessor:
    """
    Runs a command until it exits with 0 or the retry budget is used up.

    Attempts are immediate; there is no delay between them.
    """

    def __init__(self, executor: CommandExecutable, shell: Optional[str] = None) -> None:
        self.executor = executor
        self.shell = shell

    def process_with_retry(self, command: str, max_retries: int = DEFAULT_MAX_RETRIES) -> str:
        """
        Execute `command` up to `max_retries` times.

        Returns:
            The output of the first successful attempt.

        Raises:
            CommandFailure: The last attempt exited non-zero.
            Exception: Whatever the executor raised on the last attempt.
        """
        log = get_logger(__name__)
        last_error: Optional[BaseException] = None
        attempts = 0

        while attempts < max_retries:
            try:
                result = self.executor.execute(command, shell=self.shell)
                if result.exit_code == 0:
                    log.debug("Command succeeded on attempt %d: %s", attempts + 1, command)
                    return result.output
                last_error = CommandFailure(command, result.exit_code, result.error)
            except Exception as e:
                last_error = e

            attempts += 1
            log.warning("Attempt %d/%d failed: %s", attempts, max_retries, last_error)

        raise last_error or CommandFailure(command, -1, "Maximum retry count reached")

    async def process_with_retry_async(self, command: str, max_retries: int = DEFAULT_MAX_RETRIES) -> str:
        """Coroutine form of `process_with_retry`, awaiting `execute_async`."""
        log = get_logger(__name__)
        last_error: Optional[BaseException] = None
        attempts = 0

        while attempts < max_retries:
            try:
                result = await self.executor.execute_async(command, shell=self.shell)
                if result.exit_code == 0:
                    log.debug("Command succeeded on attempt %d: %s", attempts + 1, command)
                    return result.output
                last_error = CommandFailure(command, result.exit_code, result.error)
            except Exception as e:
                last_error = e

            attempts += 1
            log.warning("Attempt %d/%d failed: %s", attempts, max_retries, last_error)

        raise last_error or CommandFailure(command, -1, "Maximum retry count reached")
