"""
In-place string replacement in files.

``replace_str_in_file`` fails like every other operation: the first error is
raised. ``replace_str_in_files`` is the exception. Each file gets its own
failure boundary that catches any ``Exception``, so one unreadable or binary
file in a large tree is reported and skipped rather than stopping the whole
run.
"""

from pathlib import Path
from typing import List

from rich.console import Console
from rich.markup import escape

from easy_io.core.config import get_settings
from easy_io.core.logger import ActionStatus, ActionType, record_action

from .load import load_file_as_string
from .paths import PathLike, to_path
from .save import save_string_to_file
from .walk import walk_folder


console = Console(stderr=True)


def replace_str_in_file(path: PathLike, old: str, new: str) -> None:
    """
    Replace every occurrence of ``old`` with ``new`` in a file.

    Matching is literal and case-sensitive, and occurrences do not overlap.
    The file is only rewritten when ``old`` occurs at least once, so an
    untouched file keeps its modification time.

    Raises:
        IOError: If the file cannot be read, decoded or written
    """
    path_obj = to_path(path)
    content = load_file_as_string(path_obj)

    if old not in content:
        record_action(
            action_type=ActionType.MODIFY,
            description=f"No match in {path_obj}",
            target=str(path_obj),
            status=ActionStatus.SKIPPED
        )
        return

    count = content.count(old)
    save_string_to_file(content.replace(old, new), path_obj)

    record_action(
        action_type=ActionType.MODIFY,
        description=f"Replaced string in {path_obj}",
        target=str(path_obj),
        status=ActionStatus.EXECUTED,
        result=f"{count} occurrence(s) replaced"
    )


def replace_str_in_files(root: PathLike, old: str, new: str) -> List[Path]:
    """
    Replace ``old`` with ``new`` in every file below ``root``.

    A file that cannot be processed (permission denied, binary content, ...)
    is reported on stderr and skipped; the remaining files are still
    processed.

    Args:
        root: Folder to walk
        old: Literal text to look for
        new: Replacement text

    Returns:
        Paths of the files that could not be processed
    """
    failed: List[Path] = []

    for entry in walk_folder(root):
        if not entry.is_file():
            continue

        try:
            replace_str_in_file(entry, old, new)
        except Exception as e:
            failed.append(entry)
            record_action(
                action_type=ActionType.MODIFY,
                description=f"Failed to replace string in {entry}",
                target=str(entry),
                status=ActionStatus.FAILED,
                result=f"Error: {e}"
            )
            if get_settings().diagnostics_enabled:
                console.print(
                    f"[yellow]Failed to replace string in file '{escape(str(entry))}'.[/yellow]",
                    soft_wrap=True
                )

    return failed
