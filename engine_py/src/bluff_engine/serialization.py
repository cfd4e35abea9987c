"""
State serialization and sanitization utilities.
"""

from typing import Any, Dict, Optional

from .models import GameState


def sanitize_state(state: GameState, viewer_index: Optional[int] = None) -> Dict[str, Any]:
    """
    Sanitize game state for a presentation collaborator.

    Args:
        state: Game state to sanitize
        viewer_index: Seat of the player viewing the state (to show their cards)

    Returns:
        Plain dict safe for JSON transmission. Pile cards stay face down and
        the bullet slot is never included.
    """
    claim = state.last_claim
    sanitized = {
        "step": state.step,
        "phase": state.phase.value,
        "turn": state.turn,
        "table_rank": state.table_rank.value,
        "chamber_position": state.chamber_position,
        "alive_count": state.alive_count(),
        "pile_size": len(state.pile),
        "deal_epoch": state.deal_epoch,
        "last_claim": {
            "player_index": claim.player_index,
            "card_count": claim.card_count,
            "declared_rank": claim.declared_rank.value,
        } if claim else None,
        "players": [],
    }

    for player in state.players:
        sanitized_player = {
            "index": player.index,
            "name": player.name,
            "alive": player.alive,
            "hand_count": player.hand_count,
        }

        # Show full hand only to the viewer
        if player.index == viewer_index:
            sanitized_player["hand"] = [
                {"id": card.id, "rank": card.rank.value} for card in player.hand
            ]

        sanitized["players"].append(sanitized_player)

    return sanitized
