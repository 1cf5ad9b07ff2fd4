from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
import random
from logging import getLogger

logger = getLogger(__name__)


class Rank(Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "Jack"
    QUEEN = "Queen"
    KING = "King"
    ACE = "Ace"

    @property
    def ordinal(self) -> int:
        return RANKS.index(self)

    def __str__(self) -> str:
        return self.value


class Suit(Enum):
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    SPADES = "Spades"
    CLUBS = "Clubs"

    @property
    def ordinal(self) -> int:
        return SUITS.index(self)

    def __str__(self) -> str:
        return self.value


RANKS = list(Rank)
SUITS = list(Suit)


class EmptyDeckError(Exception):
    """Raised when dealing from a deck with no cards left."""

    def __init__(self, message: str = "No cards remaining to deal!"):
        super().__init__(message)


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    # dataclass __eq__ compares __class__ identity, so a subclass never equals a Card
    def __hash__(self) -> int:
        return (self.rank.ordinal << 8) | self.suit.ordinal

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def to_index(self) -> int:
        return self.suit.ordinal * 13 + self.rank.ordinal


class Deck:
    """
    A standard 52-card deck that deals from a cursor instead of removing cards.

    The card list is built once and never shrinks. ``cards_remaining`` marks the
    end of the live (undealt) prefix; dealt cards stay in place past it, which
    makes reset() O(1).

    Not thread safe. Even with locked methods there is a race between
    is_empty() and deal_one_card(), so callers sharing a deck across threads
    must hold their own lock across both calls.
    """

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)
        self._cards: List[Card] = [Card(r, s) for r in RANKS for s in SUITS]
        self._cards_remaining = len(self._cards)

    @property
    def cards_remaining(self) -> int:
        return self._cards_remaining

    def shuffle(self) -> None:
        """Knuth shuffle of the undealt cards only."""
        # stop at 1, swapping 0 with itself is a no-op
        for i in range(self._cards_remaining - 1, 0, -1):
            j = self._rng.randint(0, i)
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]
        logger.debug("Shuffled %d cards", self._cards_remaining)

    def is_empty(self) -> bool:
        return self._cards_remaining == 0

    def deal_one_card(self) -> Card:
        """
        Deal the top card, i.e. the last card of the live prefix.
        Raises EmptyDeckError if no cards remain.
        """
        if self._cards_remaining == 0:
            raise EmptyDeckError("No cards remaining to deal!")
        self._cards_remaining -= 1
        return self._cards[self._cards_remaining]

    def deal(self, n: int) -> List[Card]:
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        if n > self._cards_remaining:
            raise EmptyDeckError(f"Cannot deal {n} cards, only {self._cards_remaining} remaining")
        return [self.deal_one_card() for _ in range(n)]

    def remaining_cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards[:self._cards_remaining])

    def reset(self) -> None:
        # dealt cards come back in their last shuffled position
        self._cards_remaining = len(self._cards)
        logger.debug("Deck reset to %d cards", self._cards_remaining)

    def __len__(self) -> int:
        return self._cards_remaining

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other.__class__ is not self.__class__:
            return NotImplemented
        if self._cards_remaining != other._cards_remaining:
            return False
        n = self._cards_remaining
        return n == 0 or self._cards[:n] == other._cards[:n]

    def __hash__(self) -> int:
        return hash(self.remaining_cards())

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={self._cards_remaining})"
