"""
Writing text to files.
"""

from typing import Optional

from easy_io.core.config import get_settings
from easy_io.core.logger import ActionStatus, ActionType, record_action

from .create import create_folder_for_file
from .paths import PathLike, to_path


def save_string_to_file(content: str, path: PathLike, encoding: Optional[str] = None) -> None:
    """
    Write a string to a file, replacing anything already there.

    Missing parent folders are created first.

    Args:
        content: Text to write
        path: Path to the file
        encoding: File encoding (default: the configured encoding)

    Raises:
        IOError: If the file cannot be written
    """
    path_obj = to_path(path)
    encoding = encoding or get_settings().encoding

    create_folder_for_file(path_obj)

    try:
        with open(path_obj, "w", encoding=encoding, newline="") as f:
            f.write(content)
    except (OSError, UnicodeEncodeError) as e:
        record_action(
            action_type=ActionType.WRITE,
            description=f"Failed to save {path_obj}",
            target=str(path_obj),
            status=ActionStatus.FAILED,
            result=f"Error: {e}"
        )
        raise IOError(f"Failed to write to file '{path_obj}': {e}")

    record_action(
        action_type=ActionType.WRITE,
        description=f"Saved file: {path_obj}",
        target=str(path_obj),
        status=ActionStatus.EXECUTED,
        result=f"File written ({len(content)} characters)"
    )
