"""
Tests for deck construction, shuffling and dealing.
"""

import random

import pytest

from bluff_engine.constants import Rank
from bluff_engine.models import Player
from bluff_engine.rules import create_config
from bluff_engine.shuffle import (
    create_deck, create_rng, deal_cards, draw_bullet_slot, get_hand_summary,
    make_card_id, pop_card, pop_random_card, shuffle_deck
)


@pytest.mark.parametrize("players,copies", [(2, 1), (3, 2), (4, 2), (5, 3)])
def test_deck_size_and_rank_balance(players, copies):
    """Deck has 3 x players x copies cards, every rank equally represented."""
    config = create_config(player_count=players, copies_per_rank_per_player=copies)
    deck = create_deck(config.cards_per_rank())

    assert len(deck) == 3 * players * copies == config.get_deck_size()
    summary = get_hand_summary(deck)
    assert summary == {"Q": players * copies, "K": players * copies, "A": players * copies}
    assert len({card.id for card in deck}) == len(deck)


def test_card_ids_follow_rank_and_serial():
    deck = create_deck(2)
    assert [card.id for card in deck] == ["Q1", "Q2", "K3", "K4", "A5", "A6"]
    assert make_card_id(Rank.K, 4, epoch=2) == "K4-r2"


def test_redeal_epochs_never_reuse_ids():
    first = {card.id for card in create_deck(4)}
    second = {card.id for card in create_deck(4, epoch=1)}
    assert not first & second


def test_shuffle_is_deterministic_per_seed():
    deck_a = shuffle_deck(create_deck(8), create_rng(99))
    deck_b = shuffle_deck(create_deck(8), create_rng(99))
    deck_c = shuffle_deck(create_deck(8), create_rng(100))

    assert [c.id for c in deck_a] == [c.id for c in deck_b]
    assert sorted(c.id for c in deck_a) == sorted(c.id for c in deck_c)


def test_shuffle_is_in_place():
    deck = create_deck(3)
    result = shuffle_deck(deck, random.Random(1))
    assert result is deck


def test_deal_round_robin_preserves_count():
    """Sum of hand sizes equals the deck size right after dealing."""
    deck = shuffle_deck(create_deck(7), create_rng(5))  # 21 cards
    players = [Player(index=i, name=f"P{i}") for i in range(4)]

    dealt = deal_cards(deck, players)

    assert sum(p.hand_count for p in players) == len(deck)
    sizes = [p.hand_count for p in players]
    assert max(sizes) - min(sizes) <= 1
    assert sizes == [6, 5, 5, 5]
    assert dealt[0][0] is deck[0]
    assert dealt[1][0] is deck[1]


def test_deal_to_nobody():
    assert deal_cards(create_deck(1), []) == {}


def test_scenario_a_four_players_two_copies():
    """4 players, 2 copies per rank per player, table Q, seed 12345."""
    config = create_config(player_count=4, copies_per_rank_per_player=2, table_rank="Q", seed=12345)
    rng = create_rng(config.seed)
    deck = create_deck(config.cards_per_rank())

    assert len(deck) == 24
    assert get_hand_summary(deck) == {"Q": 8, "K": 8, "A": 8}

    shuffle_deck(deck, rng)
    players = [Player(index=i, name=f"P{i}") for i in range(4)]
    deal_cards(deck, players)
    assert [p.hand_count for p in players] == [6, 6, 6, 6]


def test_bullet_slot_range():
    rng = create_rng(3)
    slots = {draw_bullet_slot(rng) for _ in range(500)}
    assert slots == {1, 2, 3, 4, 5, 6}


def test_pop_card_helpers():
    player = Player(index=0, name="P0", hand=create_deck(1))

    card = pop_card(player, "K2")
    assert card.rank == Rank.K
    assert player.hand_count == 2
    assert pop_card(player, "K2") is None

    popped = pop_random_card(player, create_rng(1))
    assert popped.id in {"Q1", "A3"}
    assert player.hand_count == 1
