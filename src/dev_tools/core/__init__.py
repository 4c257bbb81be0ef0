"""Core components for dev_tools."""

from .models import Config, RunResult
from .runner import run, autorest_executable, autorest

__all__ = [
    "Config",
    "RunResult",
    "run",
    "autorest_executable",
    "autorest",
]
