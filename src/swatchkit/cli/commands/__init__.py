"""CLI commands for swatchkit."""

from .colors import convert, parse
from .config import config
from .pick import pick

__all__ = ["config", "convert", "parse", "pick"]
