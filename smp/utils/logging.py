# smp/utils/logging.py
"""
Logging setup for smp. Command output belongs to stdout; log records go to
stderr and, optionally, to a file.
"""

import logging
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler

def setup_logger(logfile: Optional[Path] = None, verbose: bool = False) -> logging.Logger:
    """
    (Re)configure the 'smp' logger. Called once per CLI invocation by the
    Typer callback, so any handlers from a previous invocation are closed
    and replaced.

    Executor and retry messages are DEBUG/WARNING, so a plain run prints
    only the command's own output; --verbose shows every spawned command.

    Args:
        logfile: Optional file that receives the same records, with timestamps.
        verbose: Lower the level to DEBUG.

    Returns:
        The 'smp' logger.
    """
    level = logging.DEBUG if verbose else logging.INFO

    log = logging.getLogger("smp")
    log.setLevel(level)
    log.propagate = False

    if log.hasHandlers():
        for handler in list(log.handlers):
            handler.close()
        log.handlers.clear()

    # stderr, so CliRunner/pipes see only command output on stdout
    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        log_time_format="[%X]"
    )
    console_handler.setLevel(level)
    log.addHandler(console_handler)

    if logfile:
        logfile = Path(logfile)
        logfile.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(logfile)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        log.addHandler(file_handler)
        log.debug("Also logging to %s", logfile)

    log.debug("smp logging at %s", logging.getLevelName(level))
    return log


def get_logger(name: str) -> logging.Logger:
    """Logger for an smp module; pass __name__ so it nests under 'smp'."""
    return logging.getLogger(name)
