"""
Filesystem operations for easy-io.

Folder creation and deletion, file and tree copying, text load/save, string
replacement, folder listing, tree printing, path helpers and scoped
directory changes.
"""

from .cd import CdGuard, cd
from .copy import copy_file, copy_folder
from .create import create_folder, create_folder_for_file
from .delete import delete_file, delete_folder
from .listing import list_folder_contents
from .load import load_file_as_string
from .modify import replace_str_in_file, replace_str_in_files
from .paths import (
    get_cwd,
    get_file_extension,
    get_file_name,
    get_file_stem,
    get_home,
    get_last_path_component,
    to_path,
)
from .save import save_string_to_file
from .tree import print_folder_tree, write_folder_tree
from .walk import walk_folder

__all__ = [
    "CdGuard",
    "cd",
    "copy_file",
    "copy_folder",
    "create_folder",
    "create_folder_for_file",
    "delete_file",
    "delete_folder",
    "list_folder_contents",
    "load_file_as_string",
    "replace_str_in_file",
    "replace_str_in_files",
    "get_cwd",
    "get_file_extension",
    "get_file_name",
    "get_file_stem",
    "get_home",
    "get_last_path_component",
    "to_path",
    "save_string_to_file",
    "print_folder_tree",
    "write_folder_tree",
    "walk_folder",
]
