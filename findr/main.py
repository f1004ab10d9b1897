# findr/main.py
"""Main entry point for the findr CLI application."""

from findr.cli.interface import main_cli


def entrypoint():
    """Function to be called by the script defined in pyproject.toml."""
    main_cli(prog_name="findr")

if __name__ == '__main__':
    entrypoint()
