# easy-io
"""
Easy interfaces for file i/o.

Thin helpers over the filesystem. Every path argument accepts a ``str`` or
any ``os.PathLike``.
"""

from .operations import (
    CdGuard,
    cd,
    copy_file,
    copy_folder,
    create_folder,
    create_folder_for_file,
    delete_file,
    delete_folder,
    get_cwd,
    get_file_extension,
    get_file_name,
    get_file_stem,
    get_home,
    get_last_path_component,
    list_folder_contents,
    load_file_as_string,
    print_folder_tree,
    replace_str_in_file,
    replace_str_in_files,
    save_string_to_file,
    to_path,
    walk_folder,
    write_folder_tree,
)

__all__ = [
    "CdGuard",
    "cd",
    "copy_file",
    "copy_folder",
    "create_folder",
    "create_folder_for_file",
    "delete_file",
    "delete_folder",
    "get_cwd",
    "get_file_extension",
    "get_file_name",
    "get_file_stem",
    "get_home",
    "get_last_path_component",
    "list_folder_contents",
    "load_file_as_string",
    "print_folder_tree",
    "replace_str_in_file",
    "replace_str_in_files",
    "save_string_to_file",
    "to_path",
    "walk_folder",
    "write_folder_tree",
]

__version__ = "0.1.0"
