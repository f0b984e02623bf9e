"""Game Card — TCG card with cost, combat stats, keywords and colors."""

from datetime import datetime

from pydantic import BaseModel, Field

from tcg_api.core.domain_types import CardId, CardType


class GameCard(BaseModel):
    """A trading-card-game card with game mechanics."""
    id: CardId | None = None
    name: str = ""
    subtitle: str = ""
    cost: int = 0
    type: str = ""
    offense: int = 0
    defense: int = 0
    keywords: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    is_resource: bool = False
    front_image_url: str = ""
    back_image_url: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def get_id(self) -> CardId | None:
        return self.id

    def get_name(self) -> str:
        return self.name

    def get_front_image_url(self) -> str:
        return self.front_image_url

    def get_back_image_url(self) -> str:
        return self.back_image_url

    def get_card_type(self) -> CardType:
        return CardType.GAME_CARD
