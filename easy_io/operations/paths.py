"""
Path utilities.

Pure functions that derive components from a path. Every function accepts a
``str`` or any ``os.PathLike`` and never touches the filesystem, apart from
``get_cwd``.
"""

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]


def to_path(path: PathLike) -> Path:
    """Convert a string or path-like object into a ``Path``."""
    return Path(path)


def get_home() -> Path:
    """
    Get the user's home directory from the ``HOME`` environment variable.

    Raises:
        EnvironmentError: If HOME is not set
    """
    home = os.environ.get("HOME")
    if home is None:
        raise EnvironmentError("HOME environment variable is not set.")
    return Path(home)


def get_cwd() -> Path:
    """
    Get the current working directory.

    Raises:
        EnvironmentError: If the working directory cannot be read
    """
    try:
        return Path(os.getcwd())
    except OSError as e:
        raise EnvironmentError(f"Failed to get the current working directory: {e}")


def get_last_path_component(path: PathLike) -> str:
    """
    Get the last component of a path.

    Trailing separators are ignored, so ``"/some/folder/"`` gives ``"folder"``.
    The root ``"/"`` is its own last component.

    Raises:
        ValueError: If the path has no components
    """
    parts = to_path(path).parts
    if not parts:
        raise ValueError(f"Failed to get the last path component of '{path}'.")
    return parts[-1]


def get_file_name(path: PathLike) -> str:
    """
    Get the file name (including extension) from a path.

    Raises:
        ValueError: If the path has no file name
    """
    name = to_path(path).name
    if not name:
        raise ValueError(f"Failed to get the file name of '{path}'.")
    return name


def get_file_stem(path: PathLike) -> str:
    """
    Get the file name without its final extension.

    Raises:
        ValueError: If the path has no file name
    """
    stem = to_path(path).stem
    if not stem:
        raise ValueError(f"Failed to get the file stem of '{path}'.")
    return stem


def get_file_extension(path: PathLike) -> str:
    """Get the final extension without the leading dot, or ``""`` if there is none."""
    return to_path(path).suffix[1:]
