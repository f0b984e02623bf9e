"""Game Cards — CRUD endpoints for /game-cards."""

from tcg_api.api.routes.resource_router import build_resource_router
from tcg_api.core.domain_types import ResourceKind
from tcg_api.models.game_card import GameCard

router = build_resource_router(
    "/game-cards", ResourceKind.GAME_CARD, GameCard, label="card", store_attr="game_cards",
)
