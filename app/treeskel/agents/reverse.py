"""Undo agent.

Removes a skeleton previously created by MaterializeAgent. Files are
deleted as they are visited, but only when empty; directories are
recorded and removed during finalize in reverse visit order so that
children go before their parents.
"""

import logging
import os

from treeskel.agents.base import Agent
from treeskel.core.exceptions import NotZeroSizeError
from treeskel.models.mode import RunMode

logger = logging.getLogger(__name__)


class ReverseAgent(Agent):
    """Removes empty files immediately and directories on finalize.

    Attributes:
        _directories: Directory paths in the order they were visited.
    """

    def __init__(self) -> None:
        self._directories: list[str] = []

    @property
    def mode(self) -> RunMode:
        return RunMode.REVERSE

    @property
    def pending_directories(self) -> list[str]:
        """Directories awaiting removal, in visit order."""
        return list(self._directories)

    def handle_directory(self, path: str) -> None:
        self._directories.append(path)

    def handle_file(self, path: str) -> None:
        """Delete the file if it exists and is empty.

        A missing file counts as already undone.

        Args:
            path: Relative path of the file.

        Raises:
            NotZeroSizeError: If the file has content.
            OSError: If an empty file cannot be removed.
        """
        try:
            size = os.stat(path).st_size
        except OSError:
            logger.debug("Nothing to remove at %s", path)
            return

        if size > 0:
            raise NotZeroSizeError(path)

        os.remove(path)

    def finalize(self) -> None:
        """Remove recorded directories, last visited first.

        Failures are ignored: a directory still holding a file that was
        refused by the size guard is expected to stay.
        """
        for path in reversed(self._directories):
            try:
                os.rmdir(path)
            except OSError as e:
                logger.debug("Leaving directory %s in place: %s", path, e)
        self._directories.clear()
