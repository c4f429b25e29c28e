"""Dry-run agent."""

from treeskel.agents.base import Agent
from treeskel.models.mode import RunMode


class SimulateAgent(Agent):
    """Agent that never touches the filesystem.

    The transcript printed by the walker is the only observable effect.
    """

    @property
    def mode(self) -> RunMode:
        return RunMode.SIMULATE

    def handle_directory(self, path: str) -> None:
        pass

    def handle_file(self, path: str) -> None:
        pass
