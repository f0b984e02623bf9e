"""Domain Types — identifiers, resource kinds and card enumerations.

Invariants:
    - Record identifiers are UUIDs; CardId / DeckId / OwnerId never carry bare strings
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CardId = NewType("CardId", UUID)
DeckId = NewType("DeckId", UUID)
OwnerId = NewType("OwnerId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class ResourceKind(str, Enum):
    """Independently keyed record families. Each has its own identifier space."""
    GAME_CARD = "game-card"
    IMAGE_CARD = "image-card"
    DECK = "deck"


class CardType(str, Enum):
    """Type tag reported by every card variant."""
    GAME_CARD = "game-card"
    IMAGE_CARD = "image-card"
    PLAYING_CARD = "playing-card"


class Suit(str, Enum):
    """The four standard playing-card suits."""
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


class SuitColor(str, Enum):
    RED = "red"
    BLACK = "black"
    UNKNOWN = "unknown"
