"""Game models and data structures"""

import copy
from dataclasses import dataclass, field
from typing import List, Optional

from .constants import Phase, Rank


@dataclass(frozen=True)
class Card:
    id: str
    rank: Rank

    def __str__(self) -> str:
        return f"{self.rank.value}-{self.id}"


@dataclass
class Player:
    index: int
    name: str
    hand: List[Card] = field(default_factory=list)  # order is irrelevant
    alive: bool = True

    @property
    def hand_count(self) -> int:
        return len(self.hand)

    def card_ids(self) -> List[str]:
        return [card.id for card in self.hand]

    def holds_rank(self, rank: Rank) -> bool:
        return any(card.rank == rank for card in self.hand)

    def __str__(self) -> str:
        return f"P{self.index}({self.name})"


@dataclass
class Claim:
    """The claim waiting for a response: which cards went on the pile and what was declared."""
    player_index: int
    card_ids: List[str]
    declared_rank: Rank

    @property
    def card_count(self) -> int:
        return len(self.card_ids)


@dataclass
class GameState:
    table_rank: Rank
    players: List[Player] = field(default_factory=list)
    turn: int = 0
    phase: Phase = Phase.CLAIM
    pile: List[Card] = field(default_factory=list)  # face down, newest last
    last_claim: Optional[Claim] = None
    bullet_slot: int = 4
    chamber_position: int = 0
    step: int = 0
    deal_epoch: int = 0  # bumped on every redeal
    deck_size: int = 0  # cards dealt in the current epoch
    game_over_announced: bool = False

    @property
    def current_player(self) -> Player:
        return self.players[self.turn]

    def alive_players(self) -> List[Player]:
        return [p for p in self.players if p.alive]

    def alive_count(self) -> int:
        return sum(1 for p in self.players if p.alive)

    def everyone_empty_hand(self) -> bool:
        """True when no alive player holds a card."""
        return all(p.hand_count == 0 for p in self.players if p.alive)

    def first_alive(self) -> Optional[int]:
        for p in self.players:
            if p.alive:
                return p.index
        return None

    def next_alive(self, start: int) -> int:
        """
        Seat index of the next alive player after ``start``, wrapping around.

        Falls back to the only survivor (or ``start`` when nobody is alive).
        """
        count = len(self.players)
        for offset in range(1, count + 1):
            idx = (start + offset) % count
            if self.players[idx].alive:
                return idx
        return start

    def cards_in_play(self) -> int:
        return sum(p.hand_count for p in self.players) + len(self.pile)

    def winner(self) -> Optional[Player]:
        alive = self.alive_players()
        return alive[0] if len(alive) == 1 else None

    def clone(self) -> "GameState":
        """Deep copy the state."""
        return copy.deepcopy(self)
