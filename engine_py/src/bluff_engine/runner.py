"""
Match Runner - drives one match at a time for a front end.

The runner:
1. Builds one agent per seat from AgentKind values
2. Steps the engine on request
3. Stops and reports when a human seat has to decide
4. Hands human decisions to the waiting seat and keeps going
5. Restarts by throwing the engine away and building a new one

Usage:
    runner = MatchRunner(config, ["human", "cautious", "reckless", "random"])
    runner.subscribe(presenter.on_event)

    while runner.step() != LoopState.GAME_OVER:
        if runner.state == LoopState.WAITING_HUMAN:
            runner.submit_claim(ask_user_for_cards())
"""

import logging
from enum import Enum
from typing import List, Optional, Sequence, Union

from .agents import AgentKind, HumanAgent, create_agents
from .constants import Phase
from .engine import GameEngine, RunResult, StepStatus
from .errors import AGENT_COUNT_MISMATCH, GameError
from .notifier import EventNotifier, Subscriber
from .rules import GameConfig, create_config

logger = logging.getLogger(__name__)


class LoopState(str, Enum):
    """State of the match loop."""
    RUNNING = "running"
    WAITING_HUMAN = "waiting_human"
    GAME_OVER = "game_over"


class MatchRunner:

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        kinds: Optional[Sequence[Union[AgentKind, str]]] = None,
    ):
        self.config = config or create_config()
        if kinds is None:
            kinds = [AgentKind.RANDOM] * self.config.player_count
        self.kinds = [AgentKind(kind) for kind in kinds]
        self._subscribers: List[Subscriber] = []
        self.engine: GameEngine = self._build_engine()
        self.state = LoopState.RUNNING

    def _build_engine(self) -> GameEngine:
        if len(self.kinds) != self.config.player_count:
            raise GameError(
                AGENT_COUNT_MISMATCH,
                f"Got {len(self.kinds)} agent kinds for {self.config.player_count} players"
            )
        names = self.config.player_names or [
            f"Player {i + 1}" for i in range(self.config.player_count)
        ]
        agents = create_agents(self.kinds, names)
        notifier = EventNotifier()
        for callback in self._subscribers:
            notifier.subscribe(callback)
        return GameEngine(self.config, agents, notifier=notifier)

    def subscribe(self, callback: Subscriber) -> Subscriber:
        """Subscribe to this and every restarted match."""
        self._subscribers.append(callback)
        self.engine.notifier.subscribe(callback)
        return callback

    def waiting_human(self) -> Optional[HumanAgent]:
        """The human seat the next step needs a decision from, if any."""
        actor = self.engine.pending_actor()
        if actor is None:
            return None
        agent = self.engine.agents[actor]
        if not isinstance(agent, HumanAgent):
            return None
        if self.engine.state.phase == Phase.CLAIM and agent.awaiting_claim:
            return agent
        if self.engine.state.phase == Phase.RESPONSE and agent.awaiting_challenge:
            return agent
        return None

    def step(self) -> LoopState:
        """Advance the match by one engine step unless a human has to decide first."""
        if self.engine.is_game_over():
            self.state = LoopState.GAME_OVER
        elif self.waiting_human() is not None:
            self.state = LoopState.WAITING_HUMAN
        else:
            status = self.engine.step_once()
            if status == StepStatus.WAITING:
                self.state = LoopState.WAITING_HUMAN
            elif self.engine.is_game_over():
                self.state = LoopState.GAME_OVER
            else:
                self.state = LoopState.RUNNING
        return self.state

    def submit_claim(self, card_ids: List[str]) -> LoopState:
        """Hand the waiting human claimant their card selection and step."""
        human = self.waiting_human()
        if human is None or self.engine.state.phase != Phase.CLAIM:
            logger.warning("Card selection submitted while no human claimant is waiting")
            return self.state
        human.submit_claim(card_ids)
        return self.step()

    def submit_challenge(self, challenge: bool) -> LoopState:
        """Hand the waiting human responder their decision and step."""
        human = self.waiting_human()
        if human is None or self.engine.state.phase != Phase.RESPONSE:
            logger.warning("Challenge decision submitted while no human responder is waiting")
            return self.state
        human.submit_challenge(challenge)
        return self.step()

    def run_to_end(self, max_steps: Optional[int] = None) -> RunResult:
        result = self.engine.run_until_game_over(max_steps)
        if self.engine.is_game_over():
            self.state = LoopState.GAME_OVER
        elif self.waiting_human() is not None:
            self.state = LoopState.WAITING_HUMAN
        return result

    def restart(self, seed: Optional[int] = None) -> GameEngine:
        """Discard the current match and start a new one, optionally with a new seed."""
        if seed is not None:
            self.config = self.config.model_copy(update={"seed": seed})
        self.engine = self._build_engine()
        self.state = LoopState.RUNNING
        logger.info(f"Match restarted with seed {self.config.seed}")
        return self.engine
