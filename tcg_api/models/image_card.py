"""Image Card — a card that is only artwork plus a name and description."""

from datetime import datetime

from pydantic import BaseModel

from tcg_api.core.domain_types import CardId, CardType


class ImageCard(BaseModel):
    id: CardId | None = None
    name: str = ""
    description: str = ""
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
        return CardType.IMAGE_CARD
