"""Baseline agent that ignores its hand."""

import random
from typing import List

from .base import BaseAgent
from ..constants import RANDOM_CHALLENGE_ODDS
from ..models import GameState


class RandomAgent(BaseAgent):

    def choose_claim_cards(self, state: GameState, player_index: int, rng: random.Random) -> List[str]:
        return self.pick_random_cards(self.get_hand(state, player_index), rng)

    def decide_challenge(self, state: GameState, responder_index: int, rng: random.Random) -> bool:
        return rng.random() < RANDOM_CHALLENGE_ODDS
