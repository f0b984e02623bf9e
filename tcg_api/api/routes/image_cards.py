"""Image Cards — CRUD endpoints for /image-cards."""

from tcg_api.api.routes.resource_router import build_resource_router
from tcg_api.core.domain_types import ResourceKind
from tcg_api.models.image_card import ImageCard

router = build_resource_router(
    "/image-cards", ResourceKind.IMAGE_CARD, ImageCard,
    label="image card", store_attr="image_cards",
)
