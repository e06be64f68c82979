# smp/utils/config.py
"""
Configuration loading utility.
Handles loading YAML files and resolving executor settings from them.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union

DEFAULT_SHELL = "/bin/sh"
DEFAULT_MAX_RETRIES = 3


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Loads a YAML configuration file.

    Args:
        path: The path to the YAML file.

    Returns:
        A dictionary containing the configuration (empty for an empty file).
    """
    with open(path, 'r') as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {path}")
    return data


def executor_settings(cfg: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Resolve the executor-related settings from a loaded configuration.

    Recognized keys::

        executor:
          shell: /bin/bash
          timeout: 30        # seconds; omit for no timeout
        retry:
          max_retries: 3

    Returns:
        A dict with ``shell``, ``timeout`` and ``max_retries``.
    """
    cfg = cfg or {}
    exec_block = cfg.get("executor") or {}
    retry_block = cfg.get("retry") or {}
    if not isinstance(exec_block, dict) or not isinstance(retry_block, dict):
        raise ValueError("'executor' and 'retry' must be mappings")

    timeout = exec_block.get("timeout")
    if timeout in (None, ""):
        timeout = None
    else:
        try:
            timeout = float(timeout)
        except (TypeError, ValueError):
            raise ValueError(f"executor.timeout must be a number, got {timeout!r}") from None
        if timeout <= 0:
            raise ValueError(f"executor.timeout must be positive, got {timeout}")

    max_retries = retry_block.get("max_retries", DEFAULT_MAX_RETRIES)
    if isinstance(max_retries, bool) or not isinstance(max_retries, int) or max_retries < 1:
        raise ValueError(f"retry.max_retries must be a positive integer, got {max_retries!r}")
    return {
        "shell": str(exec_block.get("shell") or DEFAULT_SHELL),
        "timeout": timeout,
        "max_retries": max_retries,
    }
