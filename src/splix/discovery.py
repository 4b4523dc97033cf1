"""
Module: discovery

Purpose:
    Resolves CLI source paths into the list of image files to split.
    A file path is used as-is; a directory contributes the files inside
    it whose suffix Pillow recognises (direct children only, or the whole
    tree when recursive).

Key Functions:
    - discover_images(): Images under one root path
    - collect_sources(): Combine several roots, removing duplicates

Dependencies:
    - splix.images.codec: supported_extensions()

Used By:
    - splix.cli
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from splix.images.codec import supported_extensions

logger = logging.getLogger(__name__)


def discover_images(
    root: Path,
    *,
    recursive: bool = False,
    exclude: Optional[Path] = None,
) -> List[Path]:
    """
    Find image files under a path.

    Args:
        root: Image file or directory.
        recursive: Descend into subdirectories.
        exclude: Directory to skip (normally the output directory, so that
            re-runs do not pick up previously sliced tiles).

    Returns:
        Sorted list of image paths.

    Raises:
        FileNotFoundError: If root does not exist.
    """
    if not root.exists():
        raise FileNotFoundError(f"The provided path '{root}' does not exist")

    if root.is_file():
        return [root]

    extensions = supported_extensions()
    excluded = exclude.resolve() if exclude is not None else None
    candidates = root.rglob("*") if recursive else root.iterdir()

    found = []
    for path in candidates:
        if not path.is_file() or _is_hidden(path, root):
            continue
        if path.suffix.lower() not in extensions:
            continue
        if excluded is not None and _is_within(path.resolve(), excluded):
            continue
        found.append(path)

    found.sort()
    logger.debug(f"Found {len(found)} images in {root}")
    return found


def collect_sources(
    paths: Iterable[Path],
    *,
    recursive: bool = False,
    exclude: Optional[Path] = None,
) -> List[Path]:
    """
    Discover images under several roots.

    Order follows the roots, then discover_images() order. A file found
    through two roots is listed once.

    Raises:
        FileNotFoundError: If any root does not exist.
    """
    seen = set()
    sources = []
    for root in paths:
        for path in discover_images(root, recursive=recursive, exclude=exclude):
            key = path.resolve()
            if key in seen:
                continue
            seen.add(key)
            sources.append(path)
    return sources


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def _is_within(path: Path, directory: Path) -> bool:
    try:
        path.relative_to(directory)
    except ValueError:
        return False
    return True
