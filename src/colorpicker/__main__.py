"""Main entry point for colorpicker."""

from colorpicker.cli import cli

if __name__ == "__main__":
    cli()
