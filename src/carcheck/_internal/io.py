"""CAR document loading: file or stdin, JSON only."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Union

STDIN_PATH = "-"
ARCHIVE_SUFFIX = ".zip"


class CarLoadError(ValueError):
    """The CAR document could not be read or parsed."""


class ArchiveInputError(CarLoadError):
    """Input is a compressed bundle; it must be extracted before checking."""

    def __init__(self, path: Union[str, os.PathLike]):
        self.path = str(path)
        super().__init__(f"ZIP archive input is not supported: {self.path}")


def is_archive_path(path: Union[str, os.PathLike]) -> bool:
    return str(path).lower().endswith(ARCHIVE_SUFFIX)


def _read_text(path: Union[str, os.PathLike]) -> str:
    if str(path) == STDIN_PATH:
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CarLoadError(f"{path}: not UTF-8 text ({e})") from e
    except OSError as e:
        raise CarLoadError(str(e)) from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def load_car_json(path: Union[str, os.PathLike]) -> Any:
    """
    Load a CAR document from a JSON file.

    Args:
        path: File path, or "-" for standard input

    Returns:
        Parsed JSON value (not necessarily an object)

    Raises:
        ArchiveInputError: path names a .zip bundle (checked before any read)
        CarLoadError: file unreadable or content is not valid JSON
    """
    if is_archive_path(path):
        raise ArchiveInputError(path)

    content = _read_text(path)
    try:
        return json.loads(content, parse_constant=_reject_constant)
    except RecursionError as e:
        raise CarLoadError(f"{path}: JSON nesting too deep") from e
    except ValueError as e:
        # JSONDecodeError is a ValueError; NaN and Infinity arrive here too
        raise CarLoadError(f"Invalid JSON in {path}: {e}") from e
