"""Decks — CRUD endpoints for /decks."""

from tcg_api.api.routes.resource_router import build_resource_router
from tcg_api.core.domain_types import ResourceKind
from tcg_api.models.deck import Deck

router = build_resource_router(
    "/decks", ResourceKind.DECK, Deck, label="deck", store_attr="decks",
)
