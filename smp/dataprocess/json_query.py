# smp/dataprocess/json_query.py
"""
Key-path extraction and equality filtering over a JSON array of objects.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

SAMPLE_JSON = """
[
  {"id": 1, "name": "田中太郎", "email": "taro@example.com", "active": true},
  {"id": 2, "name": "鈴木花子", "email": "hanako@example.com", "active": false},
  {"id": 3, "name": "佐藤次郎", "email": "jiro@example.com", "active": true}
]
"""

_MISSING = object()


def load_items(path: Optional[Union[str, Path]] = None) -> List[Dict[str, Any]]:
    """
    Load a JSON array of objects from `path`, or the built-in sample when no
    path is given.

    Raises:
        ValueError: The document is not an array of objects.
    """
    if path is None:
        data = json.loads(SAMPLE_JSON)
    else:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError("Not a valid JSON array")
    return data


def extract_key_path(items: List[Dict[str, Any]], key_path: str) -> List[Tuple[int, Any]]:
    """
    Resolve a dotted key path (e.g. ``user.name``) in every item.

    Returns:
        ``(index, value)`` pairs for the items where the full path exists.
    """
    keys = [k for k in key_path.split(".") if k]
    found = []
    for index, item in enumerate(items):
        current: Any = item
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                current = _MISSING
                break
        if current is not _MISSING:
            found.append((index, current))
    return found


def parse_filter(expr: str) -> Optional[Tuple[str, str]]:
    """Split ``key=value``, ignoring empty pieces (``a==b`` is ``a``, ``b``); otherwise None."""
    parts = [p for p in expr.split("=") if p]
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def _matches(item_value: Any, value: str) -> bool:
    # bool before int: True is an int in Python
    if isinstance(item_value, bool):
        return value.lower() == ("true" if item_value else "false")
    if isinstance(item_value, int):
        return str(item_value) == value
    if isinstance(item_value, str):
        return item_value == value
    return str(item_value) == value


def filter_items(items: List[Dict[str, Any]], key: str, value: str) -> List[Dict[str, Any]]:
    return [item for item in items if key in item and _matches(item[key], value)]
