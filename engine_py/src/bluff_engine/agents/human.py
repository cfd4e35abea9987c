"""
Human seat proxy.

The presentation layer collects input out of band and hands it over with
``submit_claim`` / ``submit_challenge``. Until it does, both decision calls
answer PENDING and the engine leaves the state untouched, so the driver
simply polls again later.
"""

import logging
import random
from typing import List, Optional

from .base import PENDING, BaseAgent
from ..models import GameState

logger = logging.getLogger(__name__)


class HumanAgent(BaseAgent):

    def __init__(self, name: str):
        super().__init__(name)
        self._selected_card_ids: Optional[List[str]] = None
        self._challenge_decision: Optional[bool] = None

    @property
    def awaiting_claim(self) -> bool:
        return self._selected_card_ids is None

    @property
    def awaiting_challenge(self) -> bool:
        return self._challenge_decision is None

    def submit_claim(self, card_ids: List[str]) -> None:
        """Queue the card selection for this seat's next claim."""
        self._selected_card_ids = [card_ids] if isinstance(card_ids, str) else list(card_ids)
        logger.debug(f"{self.name} selected {len(self._selected_card_ids)} card(s)")

    def submit_challenge(self, challenge: bool) -> None:
        """Queue this seat's next challenge decision."""
        self._challenge_decision = bool(challenge)
        logger.debug(f"{self.name} decided to {'challenge' if challenge else 'pass'}")

    def clear(self) -> None:
        """Drop any queued decision."""
        self._selected_card_ids = None
        self._challenge_decision = None

    def choose_claim_cards(self, state: GameState, player_index: int, rng: random.Random):
        if self._selected_card_ids is None:
            return PENDING
        selection, self._selected_card_ids = self._selected_card_ids, None
        return selection

    def decide_challenge(self, state: GameState, responder_index: int, rng: random.Random):
        if self._challenge_decision is None:
            return PENDING
        decision, self._challenge_decision = self._challenge_decision, None
        return decision
