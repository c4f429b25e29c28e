"""Abstract base class for action agents.

This module defines the Agent interface that every run mode implements.
The walker calls one handler per visited entry and the agent is
finalized exactly once after all roots are processed.
"""

from abc import ABC, abstractmethod
from types import TracebackType

from treeskel.models.mode import RunMode


class Agent(ABC):
    """Abstract base class for all action agents.

    Handlers receive paths relative to the current working directory and
    report failure by raising OSError or a TreeskelError subclass.

    Example:
        >>> with MaterializeAgent() as agent:
        ...     agent.handle_directory("x")
        ...     agent.handle_file("x/y.txt")
    """

    @property
    @abstractmethod
    def mode(self) -> RunMode:
        """Return the run mode this agent implements."""

    @abstractmethod
    def handle_directory(self, path: str) -> None:
        """Act on a visited directory.

        Args:
            path: Relative path of the directory.
        """

    @abstractmethod
    def handle_file(self, path: str) -> None:
        """Act on a visited file.

        Args:
            path: Relative path of the file.
        """

    def finalize(self) -> None:  # noqa: B027
        """Run once after all roots have been processed."""

    def __enter__(self) -> "Agent":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.finalize()
