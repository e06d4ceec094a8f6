"""
Folder creation.
"""

from easy_io.core.logger import ActionStatus, ActionType, record_action

from .paths import PathLike, to_path


def create_folder(path: PathLike) -> None:
    """
    Create a folder and any missing parents.

    Does nothing if the path already exists.

    Args:
        path: Folder to create

    Raises:
        IOError: If the folder cannot be created
    """
    path_obj = to_path(path)

    if path_obj.exists():
        record_action(
            action_type=ActionType.WRITE,
            description=f"Folder already exists: {path_obj}",
            target=str(path_obj),
            status=ActionStatus.SKIPPED
        )
        return

    try:
        path_obj.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        record_action(
            action_type=ActionType.WRITE,
            description=f"Failed to create folder {path_obj}",
            target=str(path_obj),
            status=ActionStatus.FAILED,
            result=f"Error: {e}"
        )
        raise IOError(f"Failed to create folder at '{path_obj}': {e}")

    record_action(
        action_type=ActionType.WRITE,
        description=f"Created folder: {path_obj}",
        target=str(path_obj),
        status=ActionStatus.EXECUTED
    )


def create_folder_for_file(path: PathLike) -> None:
    """
    Create the parent folder of a file path, if it is missing.

    The file itself is not created.
    """
    parent = to_path(path).parent
    create_folder(parent)
