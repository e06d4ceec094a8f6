"""
Reading files as text.
"""

from typing import Optional

from easy_io.core.config import get_settings

from .paths import PathLike, to_path


def load_file_as_string(path: PathLike, encoding: Optional[str] = None) -> str:
    """
    Read the contents of a file.

    Line endings are returned exactly as stored.

    Args:
        path: Path to the file
        encoding: File encoding (default: the configured encoding)

    Returns:
        File contents as string

    Raises:
        IOError: If the file cannot be read or decoded
    """
    path_obj = to_path(path)
    encoding = encoding or get_settings().encoding

    try:
        with open(path_obj, "r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IOError(f"Failed to load file '{path_obj}' as string: {e}")
