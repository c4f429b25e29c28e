"""Action agents for each run mode.

This module provides the Agent interface, its three implementations and
a factory that selects one from a RunMode.
"""

from treeskel.agents.base import Agent
from treeskel.agents.materialize import MaterializeAgent
from treeskel.agents.reverse import ReverseAgent
from treeskel.agents.simulate import SimulateAgent
from treeskel.models.mode import RunMode

_AGENTS: dict[RunMode, type[Agent]] = {
    RunMode.SIMULATE: SimulateAgent,
    RunMode.MATERIALIZE: MaterializeAgent,
    RunMode.REVERSE: ReverseAgent,
}


def create_agent(mode: RunMode) -> Agent:
    """Create the agent for a run mode.

    Args:
        mode: Selected run mode.

    Returns:
        A fresh Agent instance.
    """
    return _AGENTS[mode]()


__all__ = ["Agent", "MaterializeAgent", "ReverseAgent", "SimulateAgent", "create_agent"]
