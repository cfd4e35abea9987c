"""
Game configuration and validation.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .constants import (
    DEFAULT_STEP_LIMIT, MAX_BULLET_SLOT, MIN_BULLET_SLOT, RANK_ORDER, Rank, parse_rank
)


class GameConfig(BaseModel):
    """Configuration for a single match."""

    player_count: int = Field(
        default=4,
        ge=2,
        description="Number of seats at the table"
    )
    table_rank: Rank = Field(
        default=Rank.Q,
        description="Rank every claim declares for the whole match"
    )
    bullet_slot: Optional[int] = Field(
        default=None,
        ge=MIN_BULLET_SLOT,
        le=MAX_BULLET_SLOT,
        description="Bullet slot of the first chamber (drawn from the RNG when unset)"
    )
    copies_per_rank_per_player: int = Field(
        default=2,
        ge=1,
        description="Copies of each rank per seat, sets the deck density"
    )
    seed: int = Field(
        default=12345,
        description="Seed for the match RNG"
    )
    max_steps: int = Field(
        default=DEFAULT_STEP_LIMIT,
        ge=1,
        description="Default step cap for run_until_game_over"
    )
    player_names: Optional[List[str]] = Field(
        default=None,
        description="Seat names, overriding the agents' own names"
    )

    @field_validator('table_rank', mode='before')
    @classmethod
    def normalize_rank(cls, v):
        """Accept lower-case rank letters."""
        if isinstance(v, str):
            return parse_rank(v)
        return v

    @field_validator('player_names')
    @classmethod
    def validate_player_names(cls, v, info):
        """Validate one name per seat."""
        if v is None:
            return v
        player_count = info.data.get('player_count', 4)
        if len(v) != player_count:
            raise ValueError(f'player_names has {len(v)} entries, expected {player_count}')
        return v

    def get_deck_size(self, player_count: Optional[int] = None) -> int:
        """Deck size for the given number of seats (defaults to the full table)."""
        seats = self.player_count if player_count is None else player_count
        return len(RANK_ORDER) * seats * self.copies_per_rank_per_player

    def cards_per_rank(self, player_count: Optional[int] = None) -> int:
        seats = self.player_count if player_count is None else player_count
        return seats * self.copies_per_rank_per_player


# Default configuration instance
default_config = GameConfig()


def create_config(**overrides) -> GameConfig:
    """Create a GameConfig with optional overrides."""
    config_dict = default_config.model_dump()
    config_dict.update(overrides)
    return GameConfig(**config_dict)
