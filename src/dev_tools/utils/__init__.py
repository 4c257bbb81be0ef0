"""Utility modules for dev_tools."""

from .path_utils import PathUtils, normalize, is_rooted, join_path, resolve_path
from .console import ConsoleManager, StatusType
from . import arrays, assert_ex

__all__ = [
    "PathUtils",
    "normalize",
    "is_rooted",
    "join_path",
    "resolve_path",
    "ConsoleManager",
    "StatusType",
    "arrays",
    "assert_ex",
]
