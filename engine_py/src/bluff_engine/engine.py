"""Main game engine: the claim / response turn machine"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from .agents.base import PENDING
from .constants import Phase
from .errors import AGENT_COUNT_MISMATCH, INTERNAL_ERROR, INVALID_CONFIG, GameError, raise_error
from .events import (
    CardPlayedEvent, CardsRedealtEvent, ChallengeResolvedEvent, ChamberAdvancedEvent,
    ClaimPassedEvent, GameInitializedEvent, GameOverEvent, Notification,
    PlayerEliminatedEvent, PlayerSummary, TurnChangedEvent
)
from .models import Card, Claim, GameState, Player
from .notifier import EventNotifier
from .rules import GameConfig, create_config
from .shuffle import (
    create_deck, create_rng, deal_cards, draw_bullet_slot, pop_card,
    pop_random_card, shuffle_deck
)
from .validate import validate_claim_selection

logger = logging.getLogger(__name__)


class StepStatus(str, Enum):
    ADVANCED = "advanced"
    WAITING = "waiting"  # an agent answered PENDING, nothing changed
    GAME_OVER = "game_over"


class RunStatus(str, Enum):
    GAME_OVER = "game_over"
    STEP_LIMIT = "step_limit"
    WAITING = "waiting"


@dataclass
class RunResult:
    status: RunStatus
    steps: int
    winner_index: Optional[int] = None


class _AwaitingDecision(Exception):
    """Raised inside a step when the consulted agent has no answer yet."""


class GameEngine:
    """
    One match of Truth or Bluff.

    The engine owns the game state and the match RNG. Nothing else may
    mutate the state; observers read it and listen on ``notifier``.
    A restart means building a new engine.
    """

    def __init__(
        self,
        config: Union[GameConfig, Mapping[str, Any]],
        agents: Sequence[Any],
        notifier: Optional[EventNotifier] = None,
    ):
        self.config = self._load_config(config)
        agents = list(agents or [])
        if len(agents) != self.config.player_count:
            raise_error(
                AGENT_COUNT_MISMATCH,
                f"Got {len(agents)} agents for {self.config.player_count} players"
            )
        for agent in agents:
            if not (hasattr(agent, "choose_claim_cards") and hasattr(agent, "decide_challenge")):
                raise_error(INVALID_CONFIG, f"{agent!r} is not a decision agent")

        self.agents = agents
        self.notifier = notifier or EventNotifier()
        self.rng = create_rng(self.config.seed)

        bullet_slot = self.config.bullet_slot
        if bullet_slot is None:
            bullet_slot = draw_bullet_slot(self.rng)

        self.state = GameState(table_rank=self.config.table_rank, bullet_slot=bullet_slot)
        for i, agent in enumerate(agents):
            if self.config.player_names:
                name = self.config.player_names[i]
            else:
                name = getattr(agent, "name", None) or f"Player {i + 1}"
            self.state.players.append(Player(index=i, name=name))

        deck = create_deck(self.config.cards_per_rank())
        shuffle_deck(deck, self.rng)
        deal_cards(deck, self.state.players)
        self.state.deck_size = len(deck)

        logger.info(
            f"Match started: {self.config.player_count} players, table rank "
            f"{self.state.table_rank.value}, {len(deck)} cards, seed {self.config.seed}"
        )
        self._emit(GameInitializedEvent(
            step=self.state.step,
            players=[
                PlayerSummary(index=p.index, name=p.name, hand_count=p.hand_count)
                for p in self.state.players
            ],
            table_rank=self.state.table_rank,
            bullet_slot=self.state.bullet_slot,
        ))

    @staticmethod
    def _load_config(config) -> GameConfig:
        if isinstance(config, GameConfig):
            if config.player_count < 2:
                raise GameError(INVALID_CONFIG, "Need at least 2 players")
            return config
        try:
            return GameConfig(**dict(config or {}))
        except ValidationError as e:
            raise GameError(INVALID_CONFIG, str(e))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_game_over(self) -> bool:
        return self.state.alive_count() <= 1

    def get_player(self, index: int) -> Player:
        return self.state.players[index]

    @property
    def responder_index(self) -> Optional[int]:
        """Seat that answers the pending claim, if there is one."""
        if self.state.last_claim is None:
            return None
        return self.state.next_alive(self.state.last_claim.player_index)

    def is_forced_showdown(self) -> bool:
        """Two players left and the claimant just played their last card."""
        claim = self.state.last_claim
        if claim is None:
            return False
        claimant = self.get_player(claim.player_index)
        return self.state.alive_count() == 2 and claimant.hand_count == 0

    def pending_actor(self) -> Optional[int]:
        """
        Seat whose agent the next step will consult.

        None when the game is over, or when the next step needs no decision
        (forced showdown, skipped empty hand, redeal, defensive recovery).
        """
        if self.is_game_over():
            return None
        state = self.state
        if state.phase == Phase.CLAIM:
            player = state.current_player
            if player.alive and player.hand_count > 0:
                return player.index
            return None
        if state.last_claim is None or self.is_forced_showdown():
            return None
        return self.responder_index

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------

    def step_once(self) -> StepStatus:
        """
        Resolve the current phase once.

        Returns GAME_OVER without doing anything once the match is decided,
        and WAITING, with the state untouched, when the consulted agent
        answered PENDING.
        """
        if self.is_game_over():
            return StepStatus.GAME_OVER

        self.state.step += 1
        try:
            if self.state.phase == Phase.CLAIM:
                self._process_claim_phase()
            else:
                self._process_response_phase()
        except _AwaitingDecision:
            self.state.step -= 1
            return StepStatus.WAITING
        return StepStatus.ADVANCED

    def run_until_game_over(self, max_steps: Optional[int] = None) -> RunResult:
        """
        Step until the match is decided.

        Stops early when an agent is waiting for input, or after ``max_steps``
        steps (the configured ``max_steps`` by default).
        """
        limit = self.config.max_steps if max_steps is None else max_steps
        steps = 0
        while not self.is_game_over():
            if steps >= limit:
                logger.warning(f"Step limit of {limit} reached at engine step {self.state.step}")
                return RunResult(RunStatus.STEP_LIMIT, steps)
            if self.step_once() == StepStatus.WAITING:
                return RunResult(RunStatus.WAITING, steps)
            steps += 1

        self._announce_game_over()
        winner = self.state.winner()
        return RunResult(RunStatus.GAME_OVER, steps, winner.index if winner else None)

    # ------------------------------------------------------------------
    # Claim phase
    # ------------------------------------------------------------------

    def _process_claim_phase(self):
        state = self.state
        me = state.current_player

        if not me.alive:
            logger.warning(f"Step {state.step}: turn held by eliminated {me}, moving on")
            self._advance_turn()
            return

        if me.hand_count == 0:
            if state.everyone_empty_hand():
                if state.alive_count() > 1:
                    self._redeal()
                else:
                    self._announce_game_over()
                return
            logger.debug(f"Step {state.step}: {me} has no cards, skipping")
            self._advance_turn()
            self._emit_turn_changed()
            return

        cards = self._choose_and_play_cards(me)
        state.last_claim = Claim(
            player_index=me.index,
            card_ids=[card.id for card in cards],
            declared_rank=state.table_rank,
        )
        state.phase = Phase.RESPONSE

        self._emit(CardPlayedEvent(
            step=state.step,
            player_index=me.index,
            player_name=me.name,
            declared_rank=state.table_rank,
            played_count=len(cards),
            remaining_cards=me.hand_count,
        ))
        self._emit_turn_changed(self.responder_index)

    def _choose_and_play_cards(self, player: Player) -> List[Card]:
        """Ask the agent for a claim and move the cards from hand to pile."""
        agent = self.agents[player.index]
        selection = agent.choose_claim_cards(self.state, player.index, self.rng)
        if selection is PENDING:
            raise _AwaitingDecision()

        result = validate_claim_selection(player, selection)
        if not result.valid:
            logger.debug(f"Corrected claim of {player}: {', '.join(result.corrections)}")

        cards = [pop_card(player, card_id) for card_id in result.card_ids]
        if result.needs_fallback:
            cards = [pop_random_card(player, self.rng)]

        self.state.pile.extend(cards)
        return cards

    def _redeal(self):
        """Fresh deck for the survivors once every alive hand is empty."""
        state = self.state
        state.pile.clear()
        state.last_claim = None
        for player in state.players:
            player.hand = []

        alive = state.alive_players()
        state.deal_epoch += 1
        deck = create_deck(self.config.cards_per_rank(len(alive)), epoch=state.deal_epoch)
        shuffle_deck(deck, self.rng)
        deal_cards(deck, alive)
        state.deck_size = len(deck)

        state.chamber_position = 0
        state.bullet_slot = draw_bullet_slot(self.rng)
        state.turn = state.first_alive()
        state.phase = Phase.CLAIM

        logger.info(f"Redeal #{state.deal_epoch}: {len(deck)} cards to {len(alive)} players")
        self._emit(CardsRedealtEvent(
            step=state.step,
            deal_epoch=state.deal_epoch,
            deck_size=len(deck),
            player_indices=[p.index for p in alive],
        ))
        self._emit_turn_changed()

    # ------------------------------------------------------------------
    # Response phase
    # ------------------------------------------------------------------

    def _process_response_phase(self):
        state = self.state
        claim = state.last_claim

        if claim is None:
            logger.warning(f"Step {state.step}: response phase without a claim, back to claiming")
            self._advance_turn()
            state.phase = Phase.CLAIM
            return

        responder_index = self.responder_index
        forced = self.is_forced_showdown()

        if forced or self._ask_challenge(responder_index):
            self._resolve_challenge(responder_index, forced)
            return

        responder = self.get_player(responder_index)
        state.last_claim = None
        state.turn = responder_index
        state.phase = Phase.CLAIM

        self._emit(ClaimPassedEvent(
            step=state.step,
            responder_index=responder_index,
            responder_name=responder.name,
            claimant_index=claim.player_index,
        ))
        self._emit_turn_changed()

    def _ask_challenge(self, responder_index: int) -> bool:
        agent = self.agents[responder_index]
        decision = agent.decide_challenge(self.state, responder_index, self.rng)
        if decision is PENDING:
            raise _AwaitingDecision()
        return bool(decision)

    def _resolve_challenge(self, responder_index: int, forced_showdown: bool = False):
        state = self.state
        claim = state.last_claim
        claimant = self.get_player(claim.player_index)
        responder = self.get_player(responder_index)

        if not 0 < claim.card_count <= len(state.pile):
            raise_error(
                INTERNAL_ERROR,
                f"Claim of {claim.card_count} card(s) but {len(state.pile)} on the pile"
            )
        revealed = state.pile[-claim.card_count:]
        truthful = all(card.rank == state.table_rank for card in revealed)

        self._emit(ChallengeResolvedEvent(
            step=state.step,
            challenger_index=responder.index,
            challenger_name=responder.name,
            claimant_index=claimant.index,
            claimant_name=claimant.name,
            revealed_ranks=[card.rank for card in revealed],
            was_truthful=truthful,
            forced_showdown=forced_showdown,
        ))

        loser = responder if truthful else claimant
        logger.debug(
            f"Step {state.step}: {responder} challenged {claimant}, claim was "
            f"{'true' if truthful else 'a bluff'}, {loser} loses"
        )

        if forced_showdown:
            self._eliminate(loser)
        else:
            position = state.chamber_position + 1
            hit = position == state.bullet_slot
            state.chamber_position = 0 if hit else position
            self._emit(ChamberAdvancedEvent(step=state.step, chamber_position=position, hit=hit))
            if hit:
                self._eliminate(loser)

        state.last_claim = None
        state.turn = loser.index if loser.alive else state.next_alive(loser.index)
        state.phase = Phase.CLAIM

        if self.is_game_over():
            self._announce_game_over()
        else:
            self._emit_turn_changed()

    def _eliminate(self, player: Player):
        state = self.state
        player.alive = False
        state.chamber_position = 0
        state.bullet_slot = draw_bullet_slot(self.rng)

        logger.info(f"{player} eliminated, {state.alive_count()} left")
        self._emit(PlayerEliminatedEvent(
            step=state.step,
            player_index=player.index,
            player_name=player.name,
            alive_count=state.alive_count(),
        ))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _advance_turn(self):
        self.state.turn = self.state.next_alive(self.state.turn)

    def _announce_game_over(self):
        state = self.state
        if state.game_over_announced:
            return
        state.game_over_announced = True
        winner = state.winner()
        if winner:
            logger.info(f"Game over after {state.step} steps, {winner} wins")
        else:
            logger.info(f"Game over after {state.step} steps, no survivor")
        self._emit(GameOverEvent(
            step=state.step,
            winner_index=winner.index if winner else None,
            winner_name=winner.name if winner else None,
            is_draw=winner is None,
        ))

    def _emit_turn_changed(self, player_index: Optional[int] = None):
        state = self.state
        index = state.turn if player_index is None else player_index
        self._emit(TurnChangedEvent(
            step=state.step,
            player_index=index,
            player_name=state.players[index].name,
            phase=state.phase,
        ))

    def _emit(self, event: Notification):
        self.notifier.emit(event)


def create_engine(
    agents: Sequence[Any],
    config: Optional[GameConfig] = None,
    notifier: Optional[EventNotifier] = None,
    **overrides,
) -> GameEngine:
    """
    Build an engine, filling the config from defaults plus ``overrides``.

    ``player_count`` follows the number of agents unless given explicitly.
    """
    if config is None:
        overrides.setdefault("player_count", len(agents))
        try:
            config = create_config(**overrides)
        except ValidationError as e:
            raise GameError(INVALID_CONFIG, str(e))
    elif overrides:
        try:
            config = create_config(**{**config.model_dump(), **overrides})
        except ValidationError as e:
            raise GameError(INVALID_CONFIG, str(e))
    return GameEngine(config, agents, notifier=notifier)
