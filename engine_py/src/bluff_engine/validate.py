"""
Claim selection validation.

Agents may hand back anything. The engine never rejects a claim; it keeps
the usable part of the selection and records what it had to drop.
"""

from typing import Iterable, List, Optional

from .constants import MAX_CLAIM_CARDS
from .models import Player

# Correction codes
EMPTY_SELECTION = "EMPTY_SELECTION"
DUPLICATE_CARD = "DUPLICATE_CARD"
NOT_IN_HAND = "NOT_IN_HAND"
TOO_MANY_CARDS = "TOO_MANY_CARDS"


class ValidationResult:
    """Result of claim selection validation."""

    def __init__(
        self,
        card_ids: List[str],
        corrections: Optional[List[str]] = None,
    ):
        self.card_ids = card_ids
        self.corrections = corrections or []

    @property
    def valid(self) -> bool:
        """True when the selection was usable without any correction."""
        return not self.corrections

    @property
    def needs_fallback(self) -> bool:
        """True when nothing usable is left and a random card must be played."""
        return not self.card_ids


def _as_id_list(selection) -> List[str]:
    if selection is None:
        return []
    if isinstance(selection, str):
        return [selection]
    try:
        return list(selection)
    except TypeError:
        return []


def validate_claim_selection(player: Player, selection: Optional[Iterable[str]]) -> ValidationResult:
    """
    Validate the card ids an agent chose for a claim.

    Args:
        player: The claimant
        selection: Whatever the agent returned

    Returns:
        ValidationResult with at most three distinct ids from the player's hand,
        in the order the agent gave them
    """
    requested = _as_id_list(selection)
    if not requested:
        return ValidationResult([], [EMPTY_SELECTION])

    in_hand = set(player.card_ids())
    kept: List[str] = []
    corrections: List[str] = []

    for card_id in requested:
        if not isinstance(card_id, str) or card_id not in in_hand:
            corrections.append(NOT_IN_HAND)
            continue
        if card_id in kept:
            corrections.append(DUPLICATE_CARD)
            continue
        if len(kept) == MAX_CLAIM_CARDS:
            corrections.append(TOO_MANY_CARDS)
            continue
        kept.append(card_id)

    if not kept and EMPTY_SELECTION not in corrections:
        corrections.append(EMPTY_SELECTION)

    return ValidationResult(kept, corrections)
