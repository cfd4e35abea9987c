"""
Agent construction by kind.
"""

from enum import Enum
from typing import List, Sequence, Union

from .base import BaseAgent
from .cautious import CautiousAgent
from .human import HumanAgent
from .random_agent import RandomAgent
from .reckless import RecklessAgent


class AgentKind(str, Enum):
    HUMAN = "human"
    RANDOM = "random"
    CAUTIOUS = "cautious"
    RECKLESS = "reckless"


AGENT_CLASSES = {
    AgentKind.HUMAN: HumanAgent,
    AgentKind.RANDOM: RandomAgent,
    AgentKind.CAUTIOUS: CautiousAgent,
    AgentKind.RECKLESS: RecklessAgent,
}


def create_agent(kind: Union[AgentKind, str], name: str) -> BaseAgent:
    """
    Create an agent of the given kind.

    Raises:
        ValueError: If the kind is unknown
    """
    try:
        kind = AgentKind(kind)
    except ValueError:
        raise ValueError(f"Unknown agent kind: {kind}")
    return AGENT_CLASSES[kind](name)


def create_agents(kinds: Sequence[Union[AgentKind, str]], names: Sequence[str]) -> List[BaseAgent]:
    """Create one agent per seat, pairing kinds with names in seat order."""
    if len(kinds) != len(names):
        raise ValueError(f"Got {len(kinds)} agent kinds for {len(names)} seats")
    return [create_agent(kind, name) for kind, name in zip(kinds, names)]
