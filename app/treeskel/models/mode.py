"""Run mode selection."""

from enum import Enum


class RunMode(str, Enum):
    """How visited entries are acted upon.

    Attributes:
        SIMULATE: Print the transcript only (dry-run).
        MATERIALIZE: Create directories and empty files.
        REVERSE: Remove a previously materialized skeleton (undo).
    """

    SIMULATE = "simulate"
    MATERIALIZE = "materialize"
    REVERSE = "reverse"

    @classmethod
    def from_flags(cls, dry_run: bool, undo: bool) -> "RunMode":
        """Select the mode from CLI flags.

        Dry-run is checked first, so it wins when both flags are set.

        Args:
            dry_run: Whether -n was given.
            undo: Whether -u was given.

        Returns:
            The selected RunMode.
        """
        if dry_run:
            return cls.SIMULATE
        if undo:
            return cls.REVERSE
        return cls.MATERIALIZE
