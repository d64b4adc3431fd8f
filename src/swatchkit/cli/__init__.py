"""Command line interface for swatchkit."""

from .main import cli

__all__ = ["cli"]
