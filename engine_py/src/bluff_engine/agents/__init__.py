"""
Decision agents for the seats at the table.

Provides:
- BaseAgent: the two-decision contract the engine consumes
- CautiousAgent, RecklessAgent, RandomAgent: built-in bots
- HumanAgent: proxy answering PENDING until input arrives
- create_agent / create_agents: construction by AgentKind
"""

from .base import PENDING, BaseAgent
from .cautious import CautiousAgent
from .factory import AgentKind, create_agent, create_agents
from .human import HumanAgent
from .random_agent import RandomAgent
from .reckless import RecklessAgent

__all__ = [
    "PENDING",
    "AgentKind",
    "BaseAgent",
    "CautiousAgent",
    "HumanAgent",
    "RandomAgent",
    "RecklessAgent",
    "create_agent",
    "create_agents",
]
