"""
Base agent interface and utilities.
"""

import random
from abc import ABC, abstractmethod
from typing import List

from ..models import Card, GameState, Player


class _Pending:
    """Sentinel type for a decision that has not been made yet."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "PENDING"

    def __bool__(self) -> bool:
        return False


PENDING = _Pending()


class BaseAgent(ABC):
    """
    Abstract base class for seat agents.

    The engine consults one agent per seat. Agents receive the live game
    state and must treat it as read-only; the RNG is the engine's shared
    match RNG, so agents that draw from it stay reproducible.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def choose_claim_cards(self, state: GameState, player_index: int, rng: random.Random) -> List[str]:
        """
        Choose the cards to play face down as a claim of the table rank.

        Args:
            state: Current game state (read-only)
            player_index: Seat of the claimant
            rng: Shared match RNG

        Returns:
            One to three card ids from the player's own hand, or PENDING
        """
        pass

    @abstractmethod
    def decide_challenge(self, state: GameState, responder_index: int, rng: random.Random) -> bool:
        """
        Decide whether to challenge the pending claim.

        Args:
            state: Current game state (read-only)
            responder_index: Seat of the responder
            rng: Shared match RNG

        Returns:
            True to challenge, False to pass, or PENDING
        """
        pass

    def get_player(self, state: GameState, player_index: int) -> Player:
        return state.players[player_index]

    def get_hand(self, state: GameState, player_index: int) -> List[Card]:
        """Get this seat's current hand."""
        return self.get_player(state, player_index).hand

    def table_cards(self, state: GameState, player_index: int) -> List[Card]:
        """Cards in hand that really match the table rank."""
        return [c for c in self.get_hand(state, player_index) if c.rank == state.table_rank]

    def holds_table_card(self, state: GameState, player_index: int) -> bool:
        return self.get_player(state, player_index).holds_rank(state.table_rank)

    def pick_random_cards(self, hand: List[Card], rng: random.Random, max_cards: int = 3) -> List[str]:
        """Pick between one and ``max_cards`` distinct cards uniformly at random."""
        if not hand:
            return []
        count = rng.randint(1, min(max_cards, len(hand)))
        available = list(hand)
        selected = []
        for _ in range(count):
            card = available.pop(rng.randrange(len(available)))
            selected.append(card.id)
        return selected

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
