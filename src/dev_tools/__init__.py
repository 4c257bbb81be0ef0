"""dev_tools: cross-platform path handling and developer utilities."""

from .utils.path_utils import PathUtils, normalize, is_rooted, join_path, resolve_path
from .utils import arrays, assert_ex
from .core.models import Config, RunResult
from .core.runner import run, autorest_executable, autorest

__all__ = [
    "PathUtils",
    "normalize",
    "is_rooted",
    "join_path",
    "resolve_path",
    "arrays",
    "assert_ex",
    "Config",
    "RunResult",
    "run",
    "autorest_executable",
    "autorest",
]
