"""Command-line interface for dev_tools."""
import sys
import logging
import functools
from typing import Tuple

import click
from rich.markup import escape
from .core.models import Config
from .core.runner import autorest_executable
from .utils.console import ConsoleManager, StatusType, THEMES
from .utils.path_utils import normalize, is_rooted, join_path, resolve_path


def setup_logging(debug: bool, level_name: str = "WARNING") -> None:
    """Configure logging based on debug flag and configured level."""
    level = logging.DEBUG if debug else getattr(logging, level_name.upper(), logging.WARNING)
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def _console(ctx: click.Context) -> ConsoleManager:
    return ctx.obj['console']


def _fail(ctx: click.Context, error: Exception) -> None:
    console = _console(ctx)
    console.print_status(StatusType.ERROR, f"[error]ERROR:[/error] {escape(str(error))}")
    if ctx.obj['debug']:
        console.print_exception()
    ctx.exit(1)


def reports_errors(command):
    """Print unexpected errors from a command and exit with status 1."""
    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except (click.exceptions.Exit, click.ClickException, click.Abort):
            raise
        except Exception as e:
            _fail(click.get_current_context(), e)
    return wrapper


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging and tracebacks')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), default=None,
              help='Terminal color theme (default: $DEV_TOOLS_THEME or manhattan)')
@click.version_option(package_name='dev-tools')
@click.pass_context
def main(ctx: click.Context, debug: bool, theme: str) -> None:
    """
    Developer tools for cross-platform path handling.

    Paths may use forward slashes, backslashes or a mix of both. Output
    always uses forward slashes.

    Examples:

        dev-tools join a b/c 'd\\e\\f'

        dev-tools resolve src main.py

        dev-tools is-rooted 'C:\\Windows'
    """
    config = Config()
    if theme:
        config.theme = theme

    setup_logging(debug, config.log_level)

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['debug'] = debug
    ctx.obj['console'] = ConsoleManager(theme=config.theme)


@main.command('normalize')
@click.argument('path')
@click.pass_context
@reports_errors
def normalize_command(ctx: click.Context, path: str) -> None:
    """Rewrite backslashes in PATH to forward slashes."""
    _console(ctx).print_path(normalize(path))


@main.command('is-rooted')
@click.argument('path')
@click.pass_context
@reports_errors
def is_rooted_command(ctx: click.Context, path: str) -> None:
    """Report whether PATH is rooted. Exits with 1 when it is not."""
    rooted = is_rooted(path)
    _console(ctx).print("true" if rooted else "false")
    ctx.exit(0 if rooted else 1)


@main.command('join')
@click.argument('segments', nargs=-1)
@click.pass_context
@reports_errors
def join_command(ctx: click.Context, segments: Tuple[str, ...]) -> None:
    """Join SEGMENTS into one normalized path."""
    _console(ctx).print_path(join_path(*segments))


@main.command('resolve')
@click.argument('segments', nargs=-1)
@click.pass_context
@reports_errors
def resolve_command(ctx: click.Context, segments: Tuple[str, ...]) -> None:
    """Resolve SEGMENTS against the current working directory."""
    _console(ctx).print_path(resolve_path(*segments))


@main.command('autorest-exe')
@click.option('--platform', 'os_platform', default=None,
              help='Platform name as reported by sys.platform (default: current)')
@click.option('--autorest-path', default=None,
              help='Directory holding autorest (default: $AUTOREST_PATH)')
@click.pass_context
@reports_errors
def autorest_exe_command(ctx: click.Context, os_platform: str, autorest_path: str) -> None:
    """Print the command used to invoke autorest."""
    config: Config = ctx.obj['config']
    command = autorest_executable(
        os_platform=os_platform,
        autorest_path=autorest_path or config.autorest_path
    )
    _console(ctx).print_path(command)


if __name__ == '__main__':
    main()
