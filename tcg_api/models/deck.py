"""Deck — named, optionally owned, ordered list of card identifiers.

Invariants:
    - cards keeps insertion order; duplicates allowed (no uniqueness check)
    - card ids are not checked against any card store
"""

from datetime import datetime

from pydantic import BaseModel, Field

from tcg_api.core.domain_types import CardId, DeckId, OwnerId


class Deck(BaseModel):
    id: DeckId | None = None
    name: str = ""
    owner_id: OwnerId | None = None
    sleeve_image_url: str | None = None
    back_image_url: str | None = None
    cards: list[CardId] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
