"""
One-level folder listing.
"""

from pathlib import Path
from typing import List

from .paths import PathLike, to_path


def list_folder_contents(path: PathLike) -> List[Path]:
    """
    List the immediate contents of a folder.

    Args:
        path: Path to the folder

    Returns:
        Files and subfolders directly inside ``path``, sorted by their full
        path string. Subfolders are not expanded.

    Raises:
        NotADirectoryError: If path is not a folder
        IOError: If the folder cannot be read
    """
    path_obj = to_path(path)

    if not path_obj.is_dir():
        raise NotADirectoryError(f"The provided path is not a folder: {path_obj}")

    try:
        entries = list(path_obj.iterdir())
    except OSError as e:
        raise IOError(f"Failed to read folder '{path_obj}': {e}")

    return sorted(entries, key=str)
