"""
Folder tree printing.

Renders a folder as an indented diagram::

    /tmp/project
    ├── file1.txt
    ├── file2.txt
    └── subfolder
        └── file3.txt
"""

import sys
from pathlib import Path
from typing import TextIO

from .listing import list_folder_contents
from .paths import PathLike, get_last_path_component, to_path

TREE_BRANCH = "├── "
TREE_LAST_BRANCH = "└── "
TREE_PIPE = "│   "
TREE_SPACE = "    "


def _write_entries(folder: Path, prefix: str, output: TextIO) -> None:
    entries = list_folder_contents(folder)
    for i, entry in enumerate(entries):
        is_last = i == len(entries) - 1
        connector = TREE_LAST_BRANCH if is_last else TREE_BRANCH
        output.write(f"{prefix}{connector}{get_last_path_component(entry)}\n")

        if entry.is_dir():
            _write_entries(entry, prefix + (TREE_SPACE if is_last else TREE_PIPE), output)


def write_folder_tree(path: PathLike, output: TextIO) -> None:
    """
    Write a tree diagram of a folder and everything below it.

    The first line is the folder path itself. Siblings are listed in sorted
    order at every level.

    Args:
        path: Folder to render
        output: Text sink to write to (anything with a ``write`` method)

    Raises:
        NotADirectoryError: If path is not a folder
        IOError: If a folder cannot be read
    """
    path_obj = to_path(path)
    output.write(f"{path_obj}\n")
    _write_entries(path_obj, "", output)


def print_folder_tree(path: PathLike) -> None:
    """Print a tree diagram of a folder to standard output."""
    write_folder_tree(path, sys.stdout)
