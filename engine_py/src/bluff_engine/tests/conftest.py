"""
Pytest fixtures for engine tests.
"""

import pytest

from bluff_engine.agents import BaseAgent
from bluff_engine.constants import Rank
from bluff_engine.engine import GameEngine
from bluff_engine.models import Card
from bluff_engine.recorder import EventRecorder
from bluff_engine.rules import create_config


class ScriptedAgent(BaseAgent):
    """
    Agent that replays queued decisions.

    Claims are card id lists (or callables taking ``(state, index)``); once
    the queue is empty it plays its first card. Challenges default to pass.
    """

    def __init__(self, name, claims=None, challenges=None):
        super().__init__(name)
        self.claims = list(claims or [])
        self.challenges = list(challenges or [])
        self.claim_calls = 0
        self.challenge_calls = 0

    def choose_claim_cards(self, state, player_index, rng):
        self.claim_calls += 1
        if self.claims:
            choice = self.claims.pop(0)
            return choice(state, player_index) if callable(choice) else choice
        return [state.players[player_index].hand[0].id]

    def decide_challenge(self, state, responder_index, rng):
        self.challenge_calls += 1
        if self.challenges:
            return self.challenges.pop(0)
        return False


def make_cards(prefix, ranks):
    """Cards with ids ``{prefix}{n}`` for the given rank letters."""
    return [Card(id=f"{prefix}{n}", rank=Rank(r)) for n, r in enumerate(ranks, start=1)]


def set_hands(engine, hands, pile=None):
    """Replace every hand (and optionally the pile), keeping the deal size consistent."""
    state = engine.state
    for index, ranks in hands.items():
        state.players[index].hand = make_cards(f"T{index}-", ranks)
    if pile is not None:
        state.pile = make_cards("P", pile)
    state.deck_size = state.cards_in_play()


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def scripted_engine():
    """
    Factory for an engine with scripted agents.

    Returns ``(engine, agents)``; the recorder passed in (if any) only sees
    notifications emitted after construction.
    """
    def _build(player_count=3, agents=None, recorder=None, **overrides):
        agents = agents or [ScriptedAgent(f"S{i}") for i in range(player_count)]
        config = create_config(player_count=player_count, **overrides)
        engine = GameEngine(config, agents)
        if recorder is not None:
            engine.notifier.subscribe(recorder)
        return engine, agents
    return _build
