"""Traversal entry models.

This module defines the data structures describing a single entry
visited while walking a source tree.
"""

from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    """Type of a visited filesystem entry.

    Symbolic links are not followed and are reported as FILE.

    Attributes:
        DIRECTORY: Directory to be mirrored.
        FILE: Anything that is not a directory; mirrored as an empty file.
    """

    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class VisitedEntry:
    """An entry reported by the walker to an agent.

    Attributes:
        path: Path as produced by the walk, prefixed with the root text.
        entry_type: Whether the entry is a directory or a file.
        relative_path: Path with the root prefix and one leading separator removed.
    """

    path: str
    entry_type: EntryType
    relative_path: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.relative_path:
            msg = "Relative path cannot be empty"
            raise ValueError(msg)

    @property
    def is_dir(self) -> bool:
        """Check if this entry is a directory."""
        return self.entry_type == EntryType.DIRECTORY

    @property
    def transcript(self) -> str:
        """Shell-like transcript line describing what is being mirrored."""
        if self.is_dir:
            return f'mkdir      "{self.relative_path}"'
        return f'type nul > "{self.relative_path}"'
