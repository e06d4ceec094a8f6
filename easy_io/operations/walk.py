"""
Recursive directory traversal.
"""

import os
from pathlib import Path
from typing import Iterator

from .paths import PathLike, to_path


def walk_folder(root: PathLike) -> Iterator[Path]:
    """
    Lazily yield every file and folder below ``root``, depth-first.

    Each folder is yielded before its contents. ``root`` itself is not
    yielded. Sibling order is whatever the OS returns. Entries that cannot be
    read are skipped, and a ``root`` that is not a readable folder yields
    nothing. Symlinked folders are yielded but not descended into.

    Args:
        root: Folder to walk

    Yields:
        Path of each entry, joined onto ``root``
    """
    try:
        with os.scandir(to_path(root)) as it:
            entries = list(it)
    except OSError:
        return

    for entry in entries:
        yield Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield from walk_folder(entry.path)
