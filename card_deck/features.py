from typing import Iterable
import numpy as np
from logging import getLogger
from card_deck.cards import Card, Deck
from card_deck.constants import DECK_SIZE

logger = getLogger(__name__)

"""
Feature encoding for cards and deck state:
    - 52-bit one-hot for a single card
    - 52-bit multi-hot for a set of cards
    - 52-bit multi-hot for the undealt cards of a deck
    - 52-bit multi-hot for the dealt cards of a deck
"""
D_LIVE = DECK_SIZE
D_DEALT = DECK_SIZE
D_TOTAL = D_LIVE + D_DEALT

def one_hot_card(card: Card | None) -> np.ndarray:
    v = np.zeros(DECK_SIZE, dtype=np.float32)
    if card is not None:
        v[card.to_index()] = 1.0
    return v

def multi_hot_cards(cards: Iterable[Card]) -> np.ndarray:
    v = np.zeros(DECK_SIZE, dtype=np.float32)
    for c in cards:
        v[c.to_index()] = 1.0
    return v

def live_cards_mask(deck: Deck) -> np.ndarray:
    return multi_hot_cards(deck.remaining_cards())

def dealt_cards_mask(deck: Deck) -> np.ndarray:
    # every card not in the live prefix has been dealt
    return 1.0 - live_cards_mask(deck)

def encode_deck(deck: Deck) -> np.ndarray:
    """
    Returns a feature vector for the deck: [live mask, dealt mask].
    """
    live_vec = live_cards_mask(deck)
    dealt_vec = dealt_cards_mask(deck)
    assert live_vec.shape == (D_LIVE,)
    assert dealt_vec.shape == (D_DEALT,)
    return np.concatenate([live_vec, dealt_vec])
