"""
This facade exposes the public API for the scanner module.
Other parts of the application should only import from here,
not from internal modules.
"""
from .facade import (
    iter_files,
    is_xcode_project,
    require_project,
    find_file,
    find_annotated_file,
    locate_entry_point,
)

__all__ = [
    "iter_files",
    "is_xcode_project",
    "require_project",
    "find_file",
    "find_annotated_file",
    "locate_entry_point",
]
