"""
Copying files and folder trees.
"""

import shutil

from easy_io.core.logger import ActionStatus, ActionType, record_action

from .create import create_folder_for_file
from .paths import PathLike, to_path
from .walk import walk_folder


def copy_file(src: PathLike, dst: PathLike) -> None:
    """
    Copy a file from source to destination.

    Missing parent folders of the destination are created, and an existing
    destination file is overwritten.

    Args:
        src: Source file path
        dst: Destination file path

    Raises:
        IOError: If the source cannot be read or the destination written
    """
    src_path = to_path(src)
    dst_path = to_path(dst)

    create_folder_for_file(dst_path)

    try:
        shutil.copy2(src_path, dst_path)  # copy2 preserves metadata
    except OSError as e:
        record_action(
            action_type=ActionType.COPY,
            description=f"Failed to copy {src_path} to {dst_path}",
            target=str(dst_path),
            status=ActionStatus.FAILED,
            result=f"Error: {e}",
            metadata={"source": str(src_path)}
        )
        raise IOError(f"Failed to copy file from '{src_path}' to '{dst_path}': {e}")

    record_action(
        action_type=ActionType.COPY,
        description=f"Copied {src_path} to {dst_path}",
        target=str(dst_path),
        status=ActionStatus.EXECUTED,
        metadata={"source": str(src_path)}
    )


def copy_folder(src: PathLike, dst: PathLike) -> None:
    """
    Copy every file below ``src`` to the same relative location below ``dst``.

    Folders are created only as needed to hold copied files, so empty folders
    are not reproduced. Files already in ``dst`` are overwritten when a source
    file has the same relative path; anything else in ``dst`` is left alone.
    The first failure aborts the copy and keeps whatever was copied so far.

    Raises:
        IOError: If any file cannot be copied
    """
    src_path = to_path(src)
    dst_path = to_path(dst)

    for entry in walk_folder(src_path):
        if entry.is_file():
            copy_file(entry, dst_path / entry.relative_to(src_path))
