"""Allow running treeskel as ``python -m treeskel``."""

from treeskel.cli.main import app

app(prog_name="treeskel")
