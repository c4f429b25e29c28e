"""CLI package for treeskel.

This package contains the Typer application.
"""

from treeskel.cli.main import app

__all__ = ["app"]
