"""Data models for treeskel.

This module exports the traversal entry and run mode models.
"""

from treeskel.models.entry import EntryType, VisitedEntry
from treeskel.models.mode import RunMode

__all__ = ["EntryType", "RunMode", "VisitedEntry"]
