"""Unit tests for traversal entry models."""

import pytest
from treeskel.models.entry import EntryType, VisitedEntry


class TestVisitedEntry:
    """Tests for VisitedEntry dataclass."""

    def test_directory_transcript(self) -> None:
        """Directories render as a padded mkdir line."""
        entry = VisitedEntry(path="src/x", entry_type=EntryType.DIRECTORY, relative_path="x")
        assert entry.is_dir is True
        assert entry.transcript == 'mkdir      "x"'

    def test_file_transcript(self) -> None:
        """Files render as a type nul redirect."""
        entry = VisitedEntry(
            path="src/x/y.txt", entry_type=EntryType.FILE, relative_path="x/y.txt"
        )
        assert entry.is_dir is False
        assert entry.transcript == 'type nul > "x/y.txt"'

    def test_transcript_keeps_spaces_and_brackets(self) -> None:
        """Path text is embedded verbatim."""
        entry = VisitedEntry(path="r/a b[1]", entry_type=EntryType.FILE, relative_path="a b[1]")
        assert entry.transcript == 'type nul > "a b[1]"'

    def test_empty_relative_path_rejected(self) -> None:
        """The root itself can never become a VisitedEntry."""
        with pytest.raises(ValueError, match="Relative path cannot be empty"):
            VisitedEntry(path="src", entry_type=EntryType.DIRECTORY, relative_path="")

    def test_frozen(self) -> None:
        """Entries are immutable."""
        entry = VisitedEntry(path="src/x", entry_type=EntryType.DIRECTORY, relative_path="x")
        with pytest.raises(AttributeError):
            entry.relative_path = "y"  # type: ignore[misc]


class TestEntryType:
    """Tests for EntryType enum."""

    def test_values(self) -> None:
        assert EntryType.DIRECTORY.value == "directory"
        assert EntryType.FILE.value == "file"
