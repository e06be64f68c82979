# smp/dataprocess/transform.py
"""
Whole-file text transformations with optional backup of the source file.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable, Dict, Optional

from smp.utils.logging import get_logger

PREVIEW_LIMIT = 200


def _count(text: str) -> str:
    lines = text.split("\n")
    words = text.split()
    characters = [c for c in text if not c.isspace()]
    return (
        "Aggregation result:\n"
        f"Lines: {len(lines)}\n"
        f"Words: {len(words)}\n"
        f"Characters: {len(characters)}"
    )


TRANSFORMS: Dict[str, Callable[[str], str]] = {
    "uppercase": str.upper,
    "lowercase": str.lower,
    "count": _count,
    "reverse": lambda text: text[::-1],
}


def _unknown_type(transform_type: str) -> ValueError:
    return ValueError(
        f"Unknown transformation type '{transform_type}'. "
        f"Available types: {', '.join(TRANSFORMS)}"
    )


def transform_text(text: str, transform_type: str) -> str:
    func = TRANSFORMS.get(transform_type)
    if func is None:
        raise _unknown_type(transform_type)
    return func(text)


def backup_path(input_path: Path) -> Path:
    """``notes.txt`` -> ``notes.backuptxt``; a file without suffix gets ``.backup``."""
    ext = input_path.suffix.lstrip(".")
    return input_path.with_suffix(".backup" + ext)


def default_output_path(input_path: Path) -> Path:
    return input_path.with_name(f"{input_path.stem}_transformed{input_path.suffix}")


def transform_file(
    input_path: Path,
    transform_type: str = "uppercase",
    output_path: Optional[Path] = None,
    backup: bool = False,
) -> Path:
    """
    Transform the contents of `input_path` and write them out.

    Returns:
        The path the transformed text was written to.

    Raises:
        FileNotFoundError: `input_path` does not exist.
        ValueError: `transform_type` is not one of TRANSFORMS.
    """
    log = get_logger(__name__)
    input_path = Path(input_path)
    if not input_path.is_file():
        raise FileNotFoundError(f"Input file '{input_path}' not found")
    if transform_type not in TRANSFORMS:
        raise _unknown_type(transform_type)

    if backup:
        target = backup_path(input_path)
        shutil.copyfile(input_path, target)
        log.debug("Backup created: %s", target)

    text = input_path.read_text(encoding="utf-8")
    transformed = transform_text(text, transform_type)

    out = Path(output_path) if output_path else default_output_path(input_path)
    out.write_text(transformed, encoding="utf-8")
    log.debug("Wrote %d characters to %s", len(transformed), out)
    return out


def preview(text: str, limit: int = PREVIEW_LIMIT) -> str:
    if len(text) > limit:
        return text[:limit] + "\n..."
    return text
