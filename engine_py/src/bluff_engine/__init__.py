"""
Truth or Bluff game engine.

A deterministic, turn-based engine for a bluffing card game: players claim
that face-down cards match the table rank, the next player may challenge,
and every challenge spins a six-slot chamber that eliminates the loser when
the hidden bullet slot comes up.
"""

from .constants import Phase, Rank
from .engine import GameEngine, RunResult, StepStatus, create_engine
from .errors import GameError
from .models import Card, Claim, GameState, Player
from .rules import GameConfig, create_config, default_config

__version__ = "1.0.0"

__all__ = [
    "Card",
    "Claim",
    "GameConfig",
    "GameEngine",
    "GameError",
    "GameState",
    "Phase",
    "Player",
    "Rank",
    "RunResult",
    "StepStatus",
    "create_config",
    "create_engine",
    "default_config",
]
