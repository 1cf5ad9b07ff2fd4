"""Deal a few hands from a fresh deck, then run it out and reset it.

Usage:
  python scripts/deal_demo.py --hands 4 --hand_size 5 --seed 7
"""

from __future__ import annotations

import argparse
import sys
from typing import List

sys.path.insert(0, ".")

from card_deck.cards import Card, Deck
from card_deck.constants import DECK_SIZE, DEFAULT_DEMO_HANDS, DEFAULT_DEMO_HAND_SIZE, DEFAULT_SEED
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def deal_demo(args) -> List[List[Card]]:
    if args.hands * args.hand_size > DECK_SIZE:
        raise ValueError(f"Cannot deal {args.hands} hands of {args.hand_size} from {DECK_SIZE} cards")
    deck = Deck(args.seed)
    if not args.no_shuffle:
        deck.shuffle()

    # round-robin, one card per hand at a time
    hands: List[List[Card]] = [[] for _ in range(args.hands)]
    for _ in range(args.hand_size):
        for hand in hands:
            hand.append(deck.deal_one_card())
    for i, hand in enumerate(hands):
        logger.info("Hand %d: %s", i + 1, ", ".join(str(c) for c in hand))

    rest = []
    while not deck.is_empty():
        rest.append(deck.deal_one_card())
    logger.info("Dealt out the remaining %d cards", len(rest))

    deck.reset()
    logger.info("After reset: %d cards remaining", deck.cards_remaining)
    return hands


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--hands", type=int, default=DEFAULT_DEMO_HANDS)
    ap.add_argument("--hand_size", type=int, default=DEFAULT_DEMO_HAND_SIZE)
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED)
    ap.add_argument("--no_shuffle", action="store_true")
    args = ap.parse_args()
    deal_demo(args)

# python scripts/deal_demo.py --hands 2 --hand_size 7 --no_shuffle
