"""Utility modules for uniformity checking."""

from .file_utils import get_file_content, load_json_file
from .path_utils import PathHelper, make_recursive, relative_posix

__all__ = [
    "get_file_content",
    "load_json_file",
    "PathHelper",
    "make_recursive",
    "relative_posix",
]
