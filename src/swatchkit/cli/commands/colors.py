"""Color conversion commands."""

import sys

import click

from swatchkit.colors import looks_like_color
from swatchkit.core import ColorView
from swatchkit.exceptions import InvalidColorError, collect_errors
from swatchkit.models import DisplayFormat
from swatchkit.utils import format_number

TARGET_FORMATS = ["hex", "rgb", "hsl", "hsv"]


def resolve_color(value: str, strict: bool) -> ColorView:
    """
    Derive a color view, optionally refusing unrecognised input.

    Without ``strict`` anything unparseable becomes black, exactly as in
    the picker.

    Raises:
        InvalidColorError: If ``strict`` and the value is not a color
    """
    if strict and not looks_like_color(value):
        raise InvalidColorError(value)
    return ColorView.derive(value)


def format_hsv(view: ColorView) -> str:
    hsv = view.hsv
    return f"hsv({format_number(hsv.h)}, {format_number(hsv.s)}%, {format_number(hsv.v)}%)"


def convert_color(value: str, target: str, strict: bool = False) -> str:
    """Convert ``value`` to ``target`` (hex, rgb, hsl or hsv)."""
    view = resolve_color(value, strict)
    if target == "hsv":
        return format_hsv(view)
    return view.format(DisplayFormat(target))


@click.command()
@click.argument("colors", nargs=-1, required=True)
@click.option(
    "--to", "-t",
    "target",
    type=click.Choice(TARGET_FORMATS, case_sensitive=False),
    default="hex",
    help="Target format (default: hex)",
)
@click.option("--strict", is_flag=True, help="Fail on values that are not colors instead of using black")
def convert(colors: tuple[str, ...], target: str, strict: bool):
    """
    Convert one or more colors to another format.

    \b
    Examples:
      swatchkit convert "#ff5500" --to rgb
      swatchkit convert "rgba(255, 85, 0, 0.5)" "hsl(200, 50%, 50%)" --to hex
    """
    collector = collect_errors("convert colors")

    for value in colors:
        with collector.try_operation(value):
            click.echo(convert_color(value, target.lower(), strict))

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        for _, error in collector.errors:
            if isinstance(error, InvalidColorError) and error.recovery_hint:
                click.echo(f"\n{error.recovery_hint}", err=True)
                break
        sys.exit(1)


@click.command()
@click.argument("color")
@click.option("--strict", is_flag=True, help="Fail on values that are not colors instead of using black")
def parse(color: str, strict: bool):
    """
    Show every representation of a color.

    Component fields are shown as the picker would display them.
    """
    try:
        view = resolve_color(color, strict)
    except InvalidColorError as e:
        click.echo(f"Error: {e.user_message}", err=True)
        click.echo(e.recovery_hint, err=True)
        sys.exit(1)

    rgba = view.rgba_components
    hsla = view.hsla_components

    click.echo(f"Input: {color}")
    if view.value != color.strip():
        click.echo(f"  (not a color, using {view.value})")
    click.echo(f"HEX:   {view.hex}")
    click.echo(f"RGBA:  r={rgba.r} g={rgba.g} b={rgba.b} a={rgba.a}")
    click.echo(f"HSLA:  h={hsla.h} s={hsla.s}% l={hsla.l}% a={hsla.a}")
    click.echo(f"HSV:   {format_hsv(view)}")
