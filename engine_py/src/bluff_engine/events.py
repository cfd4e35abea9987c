"""
Engine notification models and validation.

Every state transition the engine makes is announced with one of these
models. They carry the engine step counter instead of a wall-clock
timestamp, so two identical matches produce identical streams.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .constants import Phase, Rank


class NotificationType(str, Enum):
    """Outbound notification types."""
    GAME_INITIALIZED = "game_initialized"
    CARD_PLAYED = "card_played"
    CLAIM_PASSED = "claim_passed"
    CHALLENGE_RESOLVED = "challenge_resolved"
    CHAMBER_ADVANCED = "chamber_advanced"
    PLAYER_ELIMINATED = "player_eliminated"
    CARDS_REDEALT = "cards_redealt"
    TURN_CHANGED = "turn_changed"
    GAME_OVER = "game_over"


class BaseNotification(BaseModel):
    """Base notification model."""
    type: NotificationType
    step: int = Field(..., ge=0)


class PlayerSummary(BaseModel):
    """Public view of a seat at initialization."""
    index: int
    name: str
    hand_count: int


class GameInitializedEvent(BaseNotification):
    type: NotificationType = NotificationType.GAME_INITIALIZED
    players: List[PlayerSummary]
    table_rank: Rank
    bullet_slot: int = Field(..., ge=1, le=6)


class CardPlayedEvent(BaseNotification):
    type: NotificationType = NotificationType.CARD_PLAYED
    player_index: int
    player_name: str
    declared_rank: Rank
    played_count: int = Field(..., ge=1, le=3)
    remaining_cards: int = Field(..., ge=0)


class ClaimPassedEvent(BaseNotification):
    """The responder let the claim stand."""
    type: NotificationType = NotificationType.CLAIM_PASSED
    responder_index: int
    responder_name: str
    claimant_index: int


class ChallengeResolvedEvent(BaseNotification):
    type: NotificationType = NotificationType.CHALLENGE_RESOLVED
    challenger_index: int
    challenger_name: str
    claimant_index: int
    claimant_name: str
    revealed_ranks: List[Rank]
    was_truthful: bool
    forced_showdown: bool = False


class ChamberAdvancedEvent(BaseNotification):
    type: NotificationType = NotificationType.CHAMBER_ADVANCED
    chamber_position: int = Field(..., ge=1, le=6)
    hit: bool


class PlayerEliminatedEvent(BaseNotification):
    type: NotificationType = NotificationType.PLAYER_ELIMINATED
    player_index: int
    player_name: str
    alive_count: int = Field(..., ge=0)


class CardsRedealtEvent(BaseNotification):
    type: NotificationType = NotificationType.CARDS_REDEALT
    deal_epoch: int = Field(..., ge=1)
    deck_size: int
    player_indices: List[int]


class TurnChangedEvent(BaseNotification):
    type: NotificationType = NotificationType.TURN_CHANGED
    player_index: int
    player_name: str
    phase: Phase


class GameOverEvent(BaseNotification):
    type: NotificationType = NotificationType.GAME_OVER
    winner_index: Optional[int] = None
    winner_name: Optional[str] = None
    is_draw: bool = False


# Union type for all notifications
Notification = Union[
    GameInitializedEvent,
    CardPlayedEvent,
    ClaimPassedEvent,
    ChallengeResolvedEvent,
    ChamberAdvancedEvent,
    PlayerEliminatedEvent,
    CardsRedealtEvent,
    TurnChangedEvent,
    GameOverEvent,
]


EVENT_MODELS = {
    NotificationType.GAME_INITIALIZED: GameInitializedEvent,
    NotificationType.CARD_PLAYED: CardPlayedEvent,
    NotificationType.CLAIM_PASSED: ClaimPassedEvent,
    NotificationType.CHALLENGE_RESOLVED: ChallengeResolvedEvent,
    NotificationType.CHAMBER_ADVANCED: ChamberAdvancedEvent,
    NotificationType.PLAYER_ELIMINATED: PlayerEliminatedEvent,
    NotificationType.CARDS_REDEALT: CardsRedealtEvent,
    NotificationType.TURN_CHANGED: TurnChangedEvent,
    NotificationType.GAME_OVER: GameOverEvent,
}


def parse_event(data: Dict[str, Any]) -> Notification:
    """
    Parse raw notification data into the matching model.

    Args:
        data: Raw notification dict, e.g. one decoded JSON line

    Returns:
        Parsed notification model

    Raises:
        ValueError: If the type is missing or unknown, or the data is malformed
    """
    event_type = data.get("type")

    if not event_type:
        raise ValueError("Missing event type")

    try:
        event_type = NotificationType(event_type)
    except ValueError:
        raise ValueError(f"Invalid event type: {event_type}")

    try:
        return EVENT_MODELS[event_type](**data)
    except ValidationError as e:
        raise ValueError(f"Invalid event data: {str(e)}")
