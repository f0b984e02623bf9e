"""Entity Models — pydantic records for every resource kind.

Invariants:
    - id is None until the store assigns one (nil sentinel)
    - Every non-id field has a zero default; bodies may omit any of them

Design Decisions:
    - One file per entity for locality
    - Records double as request/response schemas: the API stores exactly
      what it decodes, so a separate schema layer would only mirror them
"""

from tcg_api.models.card import Card  # noqa: F401
from tcg_api.models.deck import Deck  # noqa: F401
from tcg_api.models.game_card import GameCard  # noqa: F401
from tcg_api.models.image_card import ImageCard  # noqa: F401
from tcg_api.models.playing_card import PlayingCard  # noqa: F401
