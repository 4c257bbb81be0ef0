"""
Process running helpers for dev_tools.

Includes a thin wrapper for the AutoRest code generator.
"""

import logging
import subprocess
import sys
from typing import Any, Dict, List, Optional

from .models import RunResult
from ..utils.path_utils import join_path

logger = logging.getLogger(__name__)

AUTOREST_EXECUTABLE_NAME = "autorest"


def run(executable: str, args: Optional[List[str]] = None, cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None) -> RunResult:
    """
    Run an executable and wait for it to finish.

    Args:
        executable: The executable to run.
        args: Arguments to pass to the executable.
        cwd: Working directory for the process.
        env: Environment for the process. Defaults to the current one.

    Returns:
        RunResult with the exit code and captured output.

    Raises:
        FileNotFoundError: If the executable cannot be found.
    """
    command = [executable] + list(args or [])
    logger.debug(f"Running: {' '.join(command)}" + (f" (cwd: {cwd})" if cwd else ""))

    with subprocess.Popen(
        command,
        cwd=cwd,
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True
    ) as process:
        stdout, stderr = process.communicate()

    result = RunResult(
        exit_code=process.returncode,
        stdout=stdout or "",
        stderr=stderr or "",
        process_id=process.pid
    )
    if not result.succeeded():
        logger.info(f"{executable} exited with code {result.exit_code}")
    return result


def autorest_executable(os_platform: Optional[str] = None,
                        autorest_path: Optional[str] = None) -> str:
    """
    Get the command used to invoke autorest.

    Args:
        os_platform: Platform name as reported by ``sys.platform``.
            Defaults to the current platform.
        autorest_path: Directory holding autorest, or the full path to it.

    Returns:
        The autorest command, with ``.cmd`` appended on Windows.
    """
    if os_platform is None:
        os_platform = sys.platform

    command = AUTOREST_EXECUTABLE_NAME
    if autorest_path:
        if autorest_path.endswith(AUTOREST_EXECUTABLE_NAME) or autorest_path.endswith(AUTOREST_EXECUTABLE_NAME + ".cmd"):
            command = join_path(autorest_path)
        else:
            command = join_path(autorest_path, AUTOREST_EXECUTABLE_NAME)

    if os_platform == "win32" and not command.endswith(".cmd"):
        command += ".cmd"
    return command


def autorest_arguments(readme_path: str, options: Optional[Dict[str, Any]] = None) -> List[str]:
    """Build the autorest argument list. Flags set to True become bare ``--name``."""
    args = []
    if readme_path:
        args.append(readme_path)
    for name, value in (options or {}).items():
        if value is None or value is False:
            continue
        if value is True:
            args.append(f"--{name}")
        else:
            args.append(f"--{name}={value}")
    return args


def autorest(readme_path: str, options: Optional[Dict[str, Any]] = None,
             autorest_path: Optional[str] = None, cwd: Optional[str] = None,
             os_platform: Optional[str] = None) -> RunResult:
    """
    Run autorest against a readme file.

    Args:
        readme_path: Path to the autorest readme (configuration) file.
        options: Extra autorest options, e.g. ``{"typescript": True}``.
        autorest_path: Where autorest lives (see ``autorest_executable``).
        cwd: Working directory for the process.
        os_platform: Platform override, mainly for tests.

    Returns:
        RunResult from the autorest process.
    """
    executable = autorest_executable(os_platform=os_platform, autorest_path=autorest_path)
    return run(executable, autorest_arguments(readme_path, options), cwd=cwd)
