from logging import getLogger
from card_deck.cards import Card, Deck, EmptyDeckError, Rank, Suit

logger = getLogger(__name__)

__all__ = [
    "cards",
    "features",
    "constants",
    "Card",
    "Deck",
    "EmptyDeckError",
    "Rank",
    "Suit",
]
