"""Playing Card — standard 52-card deck entry with derived name and color.

Invariants:
    - value is 1-13 (ace through king) once validate() passes
    - suit is one of the four Suit values once validate() passes
    - display name and color are derived, never stored

Design Decisions:
    - Not wired to storage or routes; the model exists for card-type
      completeness and is exercised directly
"""

from datetime import datetime

from pydantic import BaseModel

from tcg_api.core.domain_types import CardId, CardType, Suit, SuitColor

_FACE_NAMES = {1: "ace", 11: "jack", 12: "queen", 13: "king"}
_RED_SUITS = {Suit.HEARTS.value, Suit.DIAMONDS.value}
_BLACK_SUITS = {Suit.CLUBS.value, Suit.SPADES.value}


class PlayingCard(BaseModel):
    id: CardId | None = None
    suit: str = ""
    value: int = 0
    front_image_url: str = ""
    back_image_url: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def value_name(self) -> str:
        return _FACE_NAMES.get(self.value, str(self.value))

    @property
    def color(self) -> SuitColor:
        if self.suit in _RED_SUITS:
            return SuitColor.RED
        if self.suit in _BLACK_SUITS:
            return SuitColor.BLACK
        return SuitColor.UNKNOWN

    def validate_card(self) -> None:
        """Raise ValueError for an out-of-range value or unknown suit."""
        if not 1 <= self.value <= 13:
            raise ValueError("value must be between 1 and 13")
        if self.suit not in _RED_SUITS | _BLACK_SUITS:
            raise ValueError(f"invalid suit: {self.suit}")

    def get_id(self) -> CardId | None:
        return self.id

    def get_name(self) -> str:
        return f"{self.value_name} of {self.suit}"

    def get_front_image_url(self) -> str:
        return self.front_image_url

    def get_back_image_url(self) -> str:
        return self.back_image_url

    def get_card_type(self) -> CardType:
        return CardType.PLAYING_CARD
