"""Main entry point for swatchkit."""

from swatchkit.cli import cli

if __name__ == "__main__":
    cli()
