"""
Core data models for dev_tools.

Configuration is read from the environment, with values from a ``.env``
file loaded first.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class Config:
    """Configuration settings for dev_tools."""

    # Directory or full path of the autorest executable
    autorest_path: Optional[str] = field(default_factory=lambda: os.getenv('AUTOREST_PATH') or None)

    theme: str = field(default_factory=lambda: os.getenv('DEV_TOOLS_THEME', 'manhattan'))
    log_level: str = field(default_factory=lambda: os.getenv('DEV_TOOLS_LOG_LEVEL', 'WARNING'))


@dataclass
class RunResult:
    """Result of running an external executable."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""
    process_id: Optional[int] = None

    def succeeded(self) -> bool:
        """Check if the process exited with status 0."""
        return self.exit_code == 0
