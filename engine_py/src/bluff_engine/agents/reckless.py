"""
Reckless agent: throws down random cards and calls bluffs often.
"""

import random
from typing import List

from .base import BaseAgent
from ..constants import RECKLESS_CHALLENGE_ODDS
from ..models import GameState


class RecklessAgent(BaseAgent):

    def choose_claim_cards(self, state: GameState, player_index: int, rng: random.Random) -> List[str]:
        return self.pick_random_cards(self.get_hand(state, player_index), rng)

    def decide_challenge(self, state: GameState, responder_index: int, rng: random.Random) -> bool:
        holding, not_holding = RECKLESS_CHALLENGE_ODDS
        odds = holding if self.holds_table_card(state, responder_index) else not_holding
        return rng.random() < odds
