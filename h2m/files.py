"""Reading and writing whole files."""

from __future__ import annotations

import os
from pathlib import Path


def read_file(file_path: str | os.PathLike) -> bytes:
    """Return the full content of a file."""
    return Path(file_path).read_bytes()


def write_file(file_path: str | os.PathLike, content: bytes | str) -> None:
    """Write content to a file, creating or truncating it."""
    Path(file_path).write_bytes(content.encode("utf-8") if isinstance(content, str) else content)