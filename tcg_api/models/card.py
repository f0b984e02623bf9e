"""Card Protocol — capabilities shared by every card variant."""

from typing import Protocol, runtime_checkable

from tcg_api.core.domain_types import CardId, CardType


@runtime_checkable
class Card(Protocol):
    """Structural contract for GameCard, ImageCard and PlayingCard."""
    def get_id(self) -> CardId | None: ...
    def get_name(self) -> str: ...
    def get_front_image_url(self) -> str: ...
    def get_back_image_url(self) -> str: ...
    def get_card_type(self) -> CardType: ...
