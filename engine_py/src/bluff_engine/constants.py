"""Game constants and utilities"""

from enum import Enum
from typing import List


class Rank(str, Enum):
    """Card ranks, low to high. Only equality with the table rank matters."""
    Q = "Q"
    K = "K"
    A = "A"


class Phase(str, Enum):
    CLAIM = "Claim"
    RESPONSE = "Response"


RANK_ORDER: List[Rank] = [Rank.Q, Rank.K, Rank.A]

# Revolver chamber
CHAMBER_SIZE = 6
MIN_BULLET_SLOT = 1
MAX_BULLET_SLOT = 6

# Claims
MIN_CLAIM_CARDS = 1
MAX_CLAIM_CARDS = 3

# Built-in agent challenge probabilities: (holding a table card, not holding one)
CAUTIOUS_CHALLENGE_ODDS = (0.10, 0.30)
RECKLESS_CHALLENGE_ODDS = (0.50, 0.80)
RANDOM_CHALLENGE_ODDS = 0.30

DEFAULT_STEP_LIMIT = 10_000


def parse_rank(value) -> Rank:
    """Accept a Rank or its letter ('q' and 'Q' both work)."""
    if isinstance(value, Rank):
        return value
    return Rank(str(value).upper())
