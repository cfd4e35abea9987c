"""
Card shuffling and dealing utilities.
"""

import random
from typing import Dict, List, Optional

from .constants import MAX_BULLET_SLOT, MIN_BULLET_SLOT, RANK_ORDER, Rank
from .models import Card, GameState, Player


def create_rng(seed: Optional[int] = None) -> random.Random:
    """Create the match RNG. The engine owns it for the lifetime of a match."""
    return random.Random(seed)


def make_card_id(rank: Rank, serial: int, epoch: int = 0) -> str:
    """Card id, unique within a match: ``Q7`` for the first deal, ``Q7-r2`` after the second redeal."""
    if epoch:
        return f"{rank.value}{serial}-r{epoch}"
    return f"{rank.value}{serial}"


def create_deck(cards_per_rank: int, epoch: int = 0) -> List[Card]:
    """
    Create a deck covering every rank evenly.

    Args:
        cards_per_rank: Copies of each rank (seats x copies per rank per seat)
        epoch: Deal epoch, keeps ids from different deals apart

    Returns:
        Deck of ``3 * cards_per_rank`` cards, Q first, then K, then A
    """
    deck = []
    serial = 1
    for rank in RANK_ORDER:
        for _ in range(cards_per_rank):
            deck.append(Card(id=make_card_id(rank, serial, epoch), rank=rank))
            serial += 1
    return deck


def shuffle_deck(deck: List, rng: random.Random) -> List:
    """
    Shuffle a deck in place (Fisher-Yates).

    Args:
        deck: Cards to shuffle
        rng: Seeded RNG, so identical seeds give identical orders

    Returns:
        The same list, for chaining
    """
    for i in range(len(deck) - 1, 0, -1):
        j = rng.randint(0, i)
        deck[i], deck[j] = deck[j], deck[i]
    return deck


def deal_cards(deck: List[Card], players: List[Player]) -> Dict[int, List[Card]]:
    """
    Deal every card round-robin in seat order.

    Args:
        deck: Shuffled deck, consumed front to back
        players: Players to deal to, in seat order

    Returns:
        Mapping of seat index to the cards that seat received
    """
    if not players:
        return {}

    dealt = {player.index: [] for player in players}
    for i, card in enumerate(deck):
        player = players[i % len(players)]
        player.hand.append(card)
        dealt[player.index].append(card)

    return dealt


def draw_bullet_slot(rng: random.Random) -> int:
    """Draw a bullet slot in [1, 6]."""
    return rng.randint(MIN_BULLET_SLOT, MAX_BULLET_SLOT)


def pop_card(player: Player, card_id: str) -> Optional[Card]:
    """Remove a card from a hand by id, or return None if the player does not hold it."""
    for idx, card in enumerate(player.hand):
        if card.id == card_id:
            return player.hand.pop(idx)
    return None


def pop_random_card(player: Player, rng: random.Random) -> Card:
    """Remove a uniformly random card from a non-empty hand."""
    return player.hand.pop(rng.randrange(len(player.hand)))


def get_hand_summary(hand: List[Card]) -> Dict[str, int]:
    """
    Get a summary of cards in a hand by rank.

    Args:
        hand: Cards to summarize

    Returns:
        Dictionary mapping rank letter to count, every rank present
    """
    summary = {rank.value: 0 for rank in RANK_ORDER}
    for card in hand:
        summary[card.rank.value] += 1
    return summary


def validate_deck_integrity(state: GameState) -> bool:
    """
    Validate that all cards of the current deal are accounted for and none is duplicated.

    Args:
        state: Game state to validate

    Returns:
        True if hands + pile hold exactly the dealt deck
    """
    all_ids = [card.id for player in state.players for card in player.hand]
    all_ids.extend(card.id for card in state.pile)

    return (
        len(all_ids) == len(set(all_ids)) and  # No duplicates
        len(all_ids) == state.deck_size  # Nothing lost or invented
    )
