"""Path and filename utilities.

Provides the output naming scheme for sliced cells and disambiguation of
source images that share a file stem.
"""

from __future__ import annotations

import os
import re
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Set


def output_file_name(stem: str, row: int, col: int, extension: str) -> str:
    """Build the file name for one sliced cell.

    Args:
        stem: Output stem for the source image.
        row: Zero-based row index.
        col: Zero-based column index.
        extension: File extension without the dot.

    Returns:
        File name in the form ``<stem>-r<row>c<col>.<ext>``.

    Examples:
        >>> output_file_name("sheet", 0, 3, "png")
        'sheet-r0c3.png'
    """
    return f"{stem}-r{row}c{col}.{extension}"


def assign_output_stems(sources: Iterable[Path]) -> Dict[Path, str]:
    """Assign each source a stem that no other source in the batch uses.

    Sources whose stems are unique keep them. Sources that share a stem
    are prefixed with their directory path relative to the common parent
    of the clashing group, and their suffix is appended if that is still
    not enough (``a.png`` and ``a.jpg`` in one directory).

    Args:
        sources: Source image paths for one batch.

    Returns:
        Mapping of source path to output stem.

    Examples:
        >>> stems = assign_output_stems([Path("x/a.png"), Path("y/a.png"), Path("b.png")])
        >>> stems[Path("x/a.png")], stems[Path("y/a.png")], stems[Path("b.png")]
        ('x_a', 'y_a', 'b')
    """
    paths: List[Path] = list(dict.fromkeys(sources))
    groups: Dict[str, List[Path]] = defaultdict(list)
    for path in paths:
        groups[path.stem].append(path)

    stems: Dict[Path, str] = {}
    for stem, group in groups.items():
        if len(group) == 1:
            stems[group[0]] = stem
            continue

        common = Path(os.path.commonpath([p.resolve().parent for p in group]))
        candidates = {}
        for path in group:
            relative = path.resolve().parent.relative_to(common)
            candidates[path] = _clean("_".join((*relative.parts, stem)))

        counts = defaultdict(int)
        for candidate in candidates.values():
            counts[candidate] += 1
        for path, candidate in candidates.items():
            if counts[candidate] > 1:
                candidate = _clean(f"{candidate}_{path.suffix.lstrip('.')}")
            stems[path] = candidate

    return _dedupe(stems, paths)


def _dedupe(stems: Dict[Path, str], order: List[Path]) -> Dict[Path, str]:
    # A disambiguated stem can still equal another source's plain stem
    # ("x/a.png" -> "x_a" vs "x_a.png"); number the later ones, skipping
    # numbers another source already uses as its stem.
    taken: Set[str] = set()
    result: Dict[Path, str] = {}
    for path in order:
        stem = candidate = stems[path]
        n = 0
        while candidate in taken:
            n += 1
            candidate = f"{stem}_{n}"
        taken.add(candidate)
        result[path] = candidate
    return result


def _clean(name: str) -> str:
    cleaned = re.sub(r"[^\w.-]+", "_", name).strip("_")
    return cleaned or "image"
