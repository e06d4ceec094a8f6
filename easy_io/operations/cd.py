"""
Scoped working-directory changes.

The working directory is process-wide state with no locking. A guard assumes
no other thread changes directory while it is active.
"""

import os
from pathlib import Path

from easy_io.core.logger import ActionStatus, ActionType, get_audit_logger, record_action

from .paths import PathLike, get_cwd, to_path


class CdGuard:
    """
    Change the working directory, and change it back when the scope ends.

    The directory changes as soon as the guard is constructed. Leaving the
    ``with`` block restores the original directory exactly once, whether the
    block finished normally or raised::

        with cd("build"):
            ...

    Nested guards restore correctly as long as they exit in LIFO order.
    """

    def __init__(self, path: PathLike):
        """
        Args:
            path: Directory to change into

        Raises:
            IOError: If the directory does not exist or cannot be entered
        """
        path_obj = to_path(path)
        self.original_cwd: Path = get_cwd()
        self._restored = False

        # Settings and the log path resolve against the caller's directory
        get_audit_logger()

        try:
            os.chdir(path_obj)
        except OSError as e:
            record_action(
                action_type=ActionType.CHDIR,
                description=f"Failed to change directory to {path_obj}",
                target=str(path_obj),
                status=ActionStatus.FAILED,
                result=f"Error: {e}"
            )
            raise IOError(f"Failed to change directory to '{path_obj}': {e}")

        try:
            record_action(
                action_type=ActionType.CHDIR,
                description=f"Changed directory to {path_obj}",
                target=str(path_obj),
                metadata={"original_cwd": str(self.original_cwd)}
            )
        except Exception:
            os.chdir(self.original_cwd)
            raise

    def __enter__(self) -> "CdGuard":
        if self._restored:
            raise RuntimeError("This directory guard has already been restored.")
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self._restore()
        # Never swallow the exception that ended the scope
        return False

    def __copy__(self):
        raise TypeError("CdGuard cannot be copied.")

    def __deepcopy__(self, memo):
        raise TypeError("CdGuard cannot be copied.")

    def _restore(self) -> None:
        if self._restored:
            return
        self._restored = True

        try:
            os.chdir(self.original_cwd)
        except OSError as e:
            record_action(
                action_type=ActionType.CHDIR,
                description=f"Failed to restore directory {self.original_cwd}",
                target=str(self.original_cwd),
                status=ActionStatus.FAILED,
                result=f"Error: {e}"
            )
            raise IOError(f"Failed to change directory to '{self.original_cwd}': {e}")

        record_action(
            action_type=ActionType.CHDIR,
            description=f"Restored directory {self.original_cwd}",
            target=str(self.original_cwd)
        )


def cd(path: PathLike) -> CdGuard:
    """
    Change into ``path`` and return a guard that changes back on exit.

    Use it as a context manager: ``with cd(path): ...``.
    """
    return CdGuard(path)
