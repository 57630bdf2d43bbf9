"""Filesystem helpers used by the file-backed store.

Writes are atomic: content goes to a temporary sibling file which is
flushed, fsynced and then renamed over the target. Readers therefore never
observe a half-written entry.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, TypeVar
import logging

logger = logging.getLogger(__name__)

R = TypeVar("R")

TMP_SUFFIX = ".tmp"


@dataclass(frozen=True)
class DirEntry:
    name: str
    is_dir: bool


def list_dir(path: str | Path) -> list[DirEntry]:
    """Return the children of `path` in listing order.

    Raises `FileNotFoundError` if the directory does not exist.
    """
    with os.scandir(path) as it:
        return [DirEntry(name=e.name, is_dir=e.is_dir()) for e in it]


def read_file(path: str | Path, fn: Callable[[BinaryIO], R]) -> R:
    with open(path, "rb") as f:
        return fn(f)


def write_file(path: str | Path, fn: Callable[[BinaryIO], None]) -> None:
    """Atomically replace `path` with whatever `fn` writes to the stream.

    Parent directories are created as needed. On failure the temporary file
    is removed and any previous content of `path` is left untouched.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + TMP_SUFFIX)
    try:
        with open(tmp, "wb") as f:
            fn(f)
            f.flush()
            os.fsync(f.fileno())
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    logger.debug("wrote %s", path)


def exists(path: str | Path) -> bool:
    """Return True if `path` is a regular file; directories do not count."""
    return Path(path).is_file()


def remove(path: str | Path) -> None:
    Path(path).unlink()
