"""Agent that creates directories and empty files.

Creation is idempotent: entries that already exist are accepted
silently, so running twice over the same tree is harmless.
"""

import logging
import os

from treeskel.agents.base import Agent
from treeskel.models.mode import RunMode

logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o777
FILE_MODE = 0o644


class MaterializeAgent(Agent):
    """Creates the skeleton relative to the current working directory."""

    @property
    def mode(self) -> RunMode:
        return RunMode.MATERIALIZE

    def handle_directory(self, path: str) -> None:
        """Create a single directory.

        Parents are not created: the walker always visits a parent
        before its children.

        Args:
            path: Relative path of the directory.

        Raises:
            OSError: If creation fails for any reason other than existence.
        """
        try:
            os.mkdir(path, DIRECTORY_MODE)
        except FileExistsError:
            logger.debug("Directory already exists: %s", path)

    def handle_file(self, path: str) -> None:
        """Create an empty file without truncating an existing one.

        Args:
            path: Relative path of the file.

        Raises:
            OSError: If the file cannot be opened for append.
        """
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, FILE_MODE)
        os.close(fd)
