# smp/executor/local.py
"""
Executes commands on the local machine through a shell interpreter.
"""

from __future__ import annotations

import asyncio
import os
import signal
import subprocess
from typing import Optional

from smp.utils.config import DEFAULT_SHELL
from smp.utils.logging import get_logger
from .base import CommandExecutable
from .errors import CommandTimeout, ProcessLaunchError
from .result import ExecutionResult


def _kill_group(process: subprocess.Popen) -> None:
    """Kill the shell and everything it started; they share one session."""
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    try:
        return data.decode("utf-8").strip()
    except UnicodeDecodeError:
        return ""


class CommandExecutor(CommandExecutable):
    """
    Runs `<shell> -c <command>` as a child process and captures its output.

    The executor holds no mutable state beyond its configured defaults, so a
    single instance may be shared between threads and tasks; every call gets
    its own child process and pipes.
    """

    def __init__(self, shell: str = DEFAULT_SHELL, timeout: Optional[float] = None) -> None:
        self.shell = shell
        self.timeout = timeout

    def execute(
        self,
        command: str,
        shell: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> ExecutionResult:
        """
        Runs the command, waits for it to exit and returns its captured output.

        Args:
            command: The shell command to execute.
            shell: Interpreter to use. Defaults to the executor's shell.
            timeout: Optional timeout in seconds. Defaults to the executor's
                timeout (None, wait indefinitely).

        Returns:
            An ExecutionResult. A non-zero exit code is reported, not raised.

        Raises:
            ProcessLaunchError: The shell could not be started.
            CommandTimeout: The command ran longer than `timeout`; the child
                has been killed.
            OSError: Reading from the child's pipes failed.
        """
        log = get_logger(__name__)
        shell = shell or self.shell
        if timeout is None:
            timeout = self.timeout
        log.debug("Executing with %s: %s", shell, command)

        try:
            process = subprocess.Popen(
                [shell, "-c", command],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                start_new_session=True,
            )
        except OSError as e:
            log.error("Failed to launch shell '%s': %s", shell, e)
            raise ProcessLaunchError(shell, command, str(e)) from e

        # Popen's context manager closes both pipes and reaps the child.
        with process:
            try:
                stdout, stderr = process.communicate(timeout=timeout)
            except subprocess.TimeoutExpired:
                _kill_group(process)
                process.communicate()
                log.error("Command timed out after %s seconds: %s", timeout, command)
                raise CommandTimeout(command, timeout)
            except BaseException:
                _kill_group(process)
                raise

        log.debug("Command finished with exit code: %d", process.returncode)
        return ExecutionResult(
            output=_decode(stdout),
            error=_decode(stderr),
            exit_code=process.returncode,
        )

    async def execute_async(
        self,
        command: str,
        shell: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> ExecutionResult:
        """Same as `execute`, but runs on a worker thread while the caller awaits."""
        return await asyncio.to_thread(self.execute, command, shell, timeout)

    # ---- Text processing ----
    @staticmethod
    def process_text(text: str, count: int, uppercase: bool) -> str:
        """
        Repeat a string `count` times, space separated, uppercasing it first if asked.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        fixed = text.upper() if uppercase else text
        return " ".join([fixed] * count)

    @staticmethod
    def build_echo_command(text: str, count: int, uppercase: bool) -> str:
        """
        Build `echo "<text>" "<text>" ...` with one quoted argument per repetition.

        The text is not escaped; the shell interprets it inside double quotes.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        fixed = text.upper() if uppercase else text
        command = "echo"
        for _ in range(count):
            command += f' "{fixed}"'
        return command

    def execute_text_processing(self, text: str, count: int, uppercase: bool) -> ExecutionResult:
        """
        Produce the repeated text by running `echo` in the shell.

        echo joins its arguments with single spaces, so the output matches
        `process_text` for plain text; `count=0` prints an empty line.
        """
        return self.execute(self.build_echo_command(text, count, uppercase))
