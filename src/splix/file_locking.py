"""
Module: file_locking

Purpose:
    Cross-platform file locking for the run manifest, which several
    image workers append to concurrently.
    Uses portalocker for Mac, Windows, and Linux compatibility.

Key Functions:
    - locked_file: Context manager for locked file access
    - locked_append_jsonl: Append to JSONL with exclusive lock

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - splix.pipeline: Manifest writing
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Generator

import portalocker

logger = logging.getLogger(__name__)


@contextmanager
def locked_file(
    path: Path,
    mode: str = 'r',
    lock_type: int = portalocker.LOCK_EX,
) -> Generator:
    """
    Context manager for cross-platform locked file access.

    Args:
        path: Path to file.
        mode: File open mode ('r', 'a', etc.).
        lock_type: Lock type (LOCK_EX for exclusive, LOCK_SH for shared).

    Yields:
        Open file handle with lock held.

    Example:
        >>> with locked_file(path, 'a') as f:
        ...     f.write('data')
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    # Ensure file exists for read modes
    if 'r' in mode and not path.exists():
        path.touch()

    with open(path, mode, encoding='utf-8') as f:
        portalocker.lock(f, lock_type)
        try:
            yield f
        finally:
            portalocker.unlock(f)


def locked_append_jsonl(path: Path, record: Dict[str, Any]) -> None:
    """
    Append a record to a JSONL file with exclusive lock.

    Thread/process-safe for concurrent writes from parallel workers.

    Args:
        path: Path to JSONL file.
        record: Dictionary to append as one JSON line.
    """
    with locked_file(path, 'a', portalocker.LOCK_EX) as f:
        f.write(json.dumps(record, ensure_ascii=False) + '\n')

    logger.debug(f"Appended record to {path.name}")

