"""
Tests for the match runner: human turns, full runs and restarts.
"""

import pytest

from bluff_engine.agents import HumanAgent, RandomAgent
from bluff_engine.constants import Phase
from bluff_engine.engine import RunStatus
from bluff_engine.errors import AGENT_COUNT_MISMATCH, GameError
from bluff_engine.events import NotificationType
from bluff_engine.recorder import EventRecorder
from bluff_engine.rules import create_config
from bluff_engine.runner import LoopState, MatchRunner


def test_default_runner_plays_random_bots():
    runner = MatchRunner(create_config(player_count=3, seed=11))

    assert all(isinstance(agent, RandomAgent) for agent in runner.engine.agents)
    assert [p.name for p in runner.engine.state.players] == ["Player 1", "Player 2", "Player 3"]

    result = runner.run_to_end()
    assert result.status == RunStatus.GAME_OVER
    assert runner.state == LoopState.GAME_OVER
    assert runner.step() == LoopState.GAME_OVER


def test_configured_names_are_used():
    config = create_config(player_count=2, player_names=["Ada", "Lin"])
    runner = MatchRunner(config, ["cautious", "reckless"])
    assert [p.name for p in runner.engine.state.players] == ["Ada", "Lin"]


def test_kind_count_mismatch():
    with pytest.raises(GameError) as exc:
        MatchRunner(create_config(player_count=3), ["random", "random"])
    assert exc.value.code == AGENT_COUNT_MISMATCH


def test_human_claimant_blocks_until_cards_submitted():
    runner = MatchRunner(create_config(player_count=3, seed=5), ["human", "cautious", "reckless"])
    engine = runner.engine

    assert runner.step() == LoopState.WAITING_HUMAN
    assert runner.step() == LoopState.WAITING_HUMAN
    assert engine.state.step == 0
    assert isinstance(runner.waiting_human(), HumanAgent)

    card_id = engine.state.players[0].hand[0].id
    runner.submit_claim([card_id])

    assert engine.state.step == 1
    assert engine.state.phase == Phase.RESPONSE
    assert [c.id for c in engine.state.pile] == [card_id]
    assert runner.waiting_human() is None


def test_out_of_turn_submission_is_ignored():
    runner = MatchRunner(create_config(player_count=3, seed=5), ["human", "random", "random"])

    assert runner.submit_challenge(True) == runner.state
    assert runner.engine.agents[0].awaiting_challenge
    assert runner.engine.state.step == 0


def test_human_match_runs_to_the_end():
    runner = MatchRunner(create_config(player_count=3, seed=21), ["human", "reckless", "random"])
    recorder = EventRecorder()
    runner.subscribe(recorder)

    for _ in range(5000):
        state = runner.step()
        if state == LoopState.GAME_OVER:
            break
        if state == LoopState.WAITING_HUMAN:
            if runner.engine.state.phase == Phase.CLAIM:
                runner.submit_claim([runner.engine.state.current_player.hand[0].id])
            else:
                runner.submit_challenge(True)

    assert runner.state == LoopState.GAME_OVER
    assert runner.engine.is_game_over()
    assert len(recorder.of_type(NotificationType.GAME_OVER)) == 1


def test_run_to_end_stops_for_human():
    runner = MatchRunner(create_config(player_count=2, seed=3), ["random", "human"])

    result = runner.run_to_end()

    assert result.status == RunStatus.WAITING
    assert runner.state == LoopState.WAITING_HUMAN
    assert runner.engine.pending_actor() == 1


def test_restart_keeps_subscribers_and_takes_new_seed():
    runner = MatchRunner(create_config(player_count=3, seed=1), ["random"] * 3)
    recorder = EventRecorder()
    runner.subscribe(recorder)
    first = runner.engine

    engine = runner.restart(seed=99)

    assert engine is runner.engine
    assert engine is not first
    assert runner.config.seed == 99
    assert engine.config.seed == 99
    assert runner.state == LoopState.RUNNING
    assert [e.type for e in recorder.events] == [NotificationType.GAME_INITIALIZED]


def test_restart_with_same_seed_replays_match():
    runner = MatchRunner(create_config(player_count=4, seed=8), ["cautious", "reckless", "random", "cautious"])
    recorder = EventRecorder()
    runner.subscribe(recorder)

    runner.restart()
    runner.run_to_end()
    first = recorder.dumps()

    recorder.clear()
    runner.restart()
    runner.run_to_end()

    assert recorder.dumps() == first
