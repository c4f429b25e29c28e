"""Utility modules for treeskel.

This module exports commonly used utility functions.
"""

from treeskel.utils.formatting import (
    err_console,
    print_failure,
    print_transcript,
    print_warning,
)

__all__ = [
    "err_console",
    "print_failure",
    "print_transcript",
    "print_warning",
]
