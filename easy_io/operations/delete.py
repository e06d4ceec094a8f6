"""
File and folder deletion.
"""

import shutil

from easy_io.core.logger import ActionStatus, ActionType, record_action

from .paths import PathLike, to_path


def delete_folder(path: PathLike) -> None:
    """
    Delete a folder and everything in it.

    A symlink to a folder is removed itself; its target is left alone.
    Does nothing if the path does not exist.

    Raises:
        IOError: If the folder cannot be deleted
    """
    path_obj = to_path(path)

    if not path_obj.exists() and not path_obj.is_symlink():
        record_action(
            action_type=ActionType.DELETE,
            description=f"Nothing to delete: {path_obj}",
            target=str(path_obj),
            status=ActionStatus.SKIPPED
        )
        return

    try:
        if path_obj.is_symlink():
            path_obj.unlink()
        else:
            shutil.rmtree(path_obj)
    except OSError as e:
        record_action(
            action_type=ActionType.DELETE,
            description=f"Failed to delete folder {path_obj}",
            target=str(path_obj),
            status=ActionStatus.FAILED,
            result=f"Error: {e}"
        )
        raise IOError(f"Failed to delete folder at '{path_obj}': {e}")

    record_action(
        action_type=ActionType.DELETE,
        description=f"Deleted folder: {path_obj}",
        target=str(path_obj),
        status=ActionStatus.EXECUTED
    )


def delete_file(path: PathLike) -> None:
    """
    Delete a file.

    Does nothing if the path does not exist.

    Raises:
        IOError: If the file cannot be deleted
    """
    path_obj = to_path(path)

    if not path_obj.exists():
        record_action(
            action_type=ActionType.DELETE,
            description=f"Nothing to delete: {path_obj}",
            target=str(path_obj),
            status=ActionStatus.SKIPPED
        )
        return

    file_size = path_obj.stat().st_size if path_obj.is_file() else 0

    try:
        path_obj.unlink()
    except OSError as e:
        record_action(
            action_type=ActionType.DELETE,
            description=f"Failed to delete file {path_obj}",
            target=str(path_obj),
            status=ActionStatus.FAILED,
            result=f"Error: {e}"
        )
        raise IOError(f"Failed to delete file at '{path_obj}': {e}")

    record_action(
        action_type=ActionType.DELETE,
        description=f"Deleted file: {path_obj}",
        target=str(path_obj),
        status=ActionStatus.EXECUTED,
        result=f"File deleted ({file_size} bytes)"
    )
