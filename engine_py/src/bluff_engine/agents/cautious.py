"""
Cautious agent: plays real table cards when it has them and rarely calls a bluff.
"""

import random
from typing import List

from .base import BaseAgent
from ..constants import CAUTIOUS_CHALLENGE_ODDS
from ..models import GameState


class CautiousAgent(BaseAgent):
    """
    Strategy:
    - Holding table-rank cards: play one or two of them, truthfully
    - Otherwise bluff with a single random card
    - Challenge 10% of the time when holding a table card itself, 30% otherwise
    """

    def choose_claim_cards(self, state: GameState, player_index: int, rng: random.Random) -> List[str]:
        hand = self.get_hand(state, player_index)
        if not hand:
            return []

        real_cards = self.table_cards(state, player_index)
        if real_cards:
            count = min(rng.randint(1, 2), len(real_cards))
            return [card.id for card in real_cards[:count]]

        return [hand[rng.randrange(len(hand))].id]

    def decide_challenge(self, state: GameState, responder_index: int, rng: random.Random) -> bool:
        holding, not_holding = CAUTIOUS_CHALLENGE_ODDS
        odds = holding if self.holds_table_card(state, responder_index) else not_holding
        return rng.random() < odds
