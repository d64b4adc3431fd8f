"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from swatchkit import __version__

from .commands import config, convert, parse, pick

logger = logging.getLogger(__name__)

LOG_DIR = Path.home() / ".swatchkit" / "logs"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where log output goes for the given flags."""
    if log_file:
        return log_file
    if debug:
        # Debug mode: log to current directory
        return Path.cwd() / "swatchkit-debug.log"
    return LOG_DIR / "swatchkit.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    The terminal picker owns stdout, so logs always go to a file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


def run_picker(value: Optional[str], ctx_obj: dict) -> Optional[str]:
    """
    Run the terminal picker and return the final color (None if cancelled).

    Errors are reported as a short message plus recovery hint, with the
    traceback left in the log file.
    """
    # Lazy imports to keep the conversion commands fast
    from swatchkit.models import PickerConfig
    from swatchkit.tui import PickerApp

    log_path = setup_logging(
        ctx_obj.get("verbose", 0),
        ctx_obj.get("debug", False),
        ctx_obj.get("log_file"),
        ctx_obj.get("log_level", "INFO"),
    )
    logger.info("Starting swatchkit picker")

    try:
        config_path = ctx_obj.get("config_path")
        picker_config = PickerConfig.load_or_default(config_path)
        app = PickerApp(config=picker_config, value=value, config_path=config_path)
        return app.run()

    except KeyboardInterrupt:
        logger.info("Picker interrupted by user")
        click.echo("\nShutting down...", err=True)
        return None
    except click.Abort:
        raise
    except Exception as e:
        from swatchkit.exceptions import format_error_for_display

        logger.exception("Error running picker")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "=" * 70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("=" * 70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        click.echo("For logging options, run: swatchkit --help", err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="swatchkit")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./swatchkit-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Picker config file (default: ~/.swatchkit/config.json)'
)
def cli(
    ctx,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
    config_path: Optional[Path]
):
    """
    Swatchkit - color conversion and a terminal color picker.

    Without a command, opens the picker with the configured initial color.

    \b
    Examples:
      # Open the picker
      swatchkit

      # Open the picker on a color and print the result
      swatchkit pick "#ff5500"

      # Convert between formats
      swatchkit convert "rgba(255, 85, 0, 0.5)" --to hsl

      # Show every representation of a color
      swatchkit parse "hsl(20, 100%, 50%)"

      # Show the picker configuration
      swatchkit config show
    """
    ctx.ensure_object(dict)
    ctx.obj.update(
        verbose=verbose,
        debug=debug,
        log_file=log_file,
        log_level=log_level,
        config_path=config_path,
    )

    # If a subcommand was invoked, don't run the picker
    if ctx.invoked_subcommand is not None:
        return

    result = run_picker(None, ctx.obj)
    if result is not None:
        click.echo(result)


cli.add_command(convert)
cli.add_command(parse)
cli.add_command(pick)
cli.add_command(config)

if __name__ == "__main__":
    cli()
