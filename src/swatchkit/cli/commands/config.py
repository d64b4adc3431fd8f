"""Picker configuration commands.

Commands:
    - config show [--field FIELD]     # Display configuration
    - config path                     # Print the config file location
    - config set --option VALUE ...   # Update configuration
    - config validate                 # Validate config file
    - config reset                    # Reset to defaults
"""

import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from swatchkit.exceptions import ConfigurationError, SwatchKitError, wrap_pydantic_error
from swatchkit.models import DEFAULT_CONFIG_PATH, PickerConfig, TriggerMode
from swatchkit.persistence import PydanticPersistence

CHECK = "[OK]"
CROSS = "[FAIL]"


def _config_path(ctx: click.Context) -> Path:
    obj = ctx.find_root().obj or {}
    return obj.get("config_path") or DEFAULT_CONFIG_PATH


def _report(error: SwatchKitError) -> None:
    click.echo(f"Error: {error.user_message}", err=True)
    if error.recovery_hint:
        click.echo(f"Hint: {error.recovery_hint}", err=True)


@click.group(name="config")
def config():
    """Configure the color picker."""
    pass


@config.command(name="path")
@click.pass_context
def show_path(ctx):
    """Print the location of the config file."""
    click.echo(str(_config_path(ctx)))


@config.command(name="show")
@click.option("--field", "-f", "fields", multiple=True, help="Show only these fields")
@click.pass_context
def show_config(ctx, fields: tuple[str, ...]):
    """Display the picker configuration."""
    path = _config_path(ctx)
    try:
        picker_config = PickerConfig.load_or_default(path)
    except ConfigurationError as e:
        _report(e)
        sys.exit(1)

    data = picker_config.model_dump(mode="json")

    if fields:
        for field in fields:
            if field not in data:
                click.echo(f"Error: Field '{field}' does not exist", err=True)
                sys.exit(1)
            click.echo(f"{field}: {data[field]}")
        return

    click.echo(f"\nPickerConfig ({path}):")
    click.echo("=" * 60)
    for key, value in data.items():
        if key == "presets":
            click.echo(f"  {key}: {len(value)} swatches")
            for start in range(0, len(value), 8):
                click.echo(f"    {' '.join(value[start:start + 8])}")
        else:
            click.echo(f"  {key}: {value}")
    click.echo("")


@config.command(name="set")
@click.option("--show-alpha/--no-show-alpha", default=None, help="Show the opacity slider")
@click.option("--show-presets/--no-show-presets", default=None, help="Show the preset swatches")
@click.option(
    "--trigger-mode",
    type=click.Choice([mode.value for mode in TriggerMode], case_sensitive=False),
    default=None,
    help="Trigger content: text, icon or both",
)
@click.option("--initial-value", type=str, default=None, help="Color used when none is given")
@click.pass_context
def set_config(
    ctx,
    show_alpha: Optional[bool],
    show_presets: Optional[bool],
    trigger_mode: Optional[str],
    initial_value: Optional[str],
):
    """Update configuration fields and save."""
    path = _config_path(ctx)
    updates = {
        key: value
        for key, value in {
            "show_alpha": show_alpha,
            "show_presets": show_presets,
            "trigger_mode": trigger_mode,
            "initial_value": initial_value,
        }.items()
        if value is not None
    }

    if not updates:
        click.echo("No options given. Run 'swatchkit config set --help' for the list.", err=True)
        sys.exit(1)

    try:
        current = PickerConfig.load_or_default(path)
        updated = PickerConfig.model_validate({**current.model_dump(), **updates})
        updated.save(path)
    except ValidationError as e:
        _report(wrap_pydantic_error(e, str(path)))
        sys.exit(1)
    except ConfigurationError as e:
        _report(e)
        sys.exit(1)

    for key, value in updates.items():
        click.echo(f"{CHECK} {key} = {value}")
    click.echo(f"\nConfiguration saved to {path}")


@config.command(name="validate")
@click.pass_context
def validate_config(ctx):
    """Validate the config file."""
    path = _config_path(ctx)
    is_valid, message = PydanticPersistence.validate_json(path, PickerConfig)

    if is_valid:
        click.echo(f"{CHECK} Configuration is valid")
        click.echo(f"  File: {path}")
    else:
        click.echo(f"{CROSS} Configuration validation failed", err=True)
        click.echo(f"  Error: {message}", err=True)
        sys.exit(1)


@config.command(name="reset")
@click.option("--yes", "-y", is_flag=True, help="Don't ask for confirmation")
@click.pass_context
def reset_config(ctx, yes: bool):
    """Reset all fields to their defaults."""
    path = _config_path(ctx)
    if not yes:
        click.confirm(f"Reset {path} to defaults?", abort=True)

    PickerConfig().save(path)
    click.echo(f"{CHECK} Reset all fields to defaults")
    click.echo(f"Configuration saved to {path}")
