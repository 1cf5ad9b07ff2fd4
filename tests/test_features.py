import numpy as np
from card_deck.cards import Card, Deck, Rank, Suit
from card_deck.features import (
    D_TOTAL,
    dealt_cards_mask,
    encode_deck,
    live_cards_mask,
    multi_hot_cards,
    one_hot_card,
)


def test_one_hot_card():
    vec = one_hot_card(Card(Rank.ACE, Suit.CLUBS))
    assert vec.dtype == np.float32
    assert vec.shape == (52,)
    assert vec.sum() == 1.0
    assert vec[51] == 1.0
    assert not one_hot_card(None).any()


def test_multi_hot_cards():
    hand = [Card(Rank.TWO, Suit.HEARTS), Card(Rank.TWO, Suit.DIAMONDS), Card(Rank.KING, Suit.SPADES)]
    vec = multi_hot_cards(hand)
    assert vec.sum() == 3.0
    assert np.flatnonzero(vec).tolist() == [0, 13, 37]


def test_fresh_deck_masks():
    deck = Deck()
    assert np.array_equal(live_cards_mask(deck), np.ones(52, dtype=np.float32))
    assert not dealt_cards_mask(deck).any()


def test_masks_track_dealing():
    deck = Deck()
    dealt = deck.deal(3)
    live = live_cards_mask(deck)
    gone = dealt_cards_mask(deck)
    assert live.sum() == 49.0
    assert gone.sum() == 3.0
    for c in dealt:
        assert live[c.to_index()] == 0.0
        assert gone[c.to_index()] == 1.0
    deck.reset()
    assert not dealt_cards_mask(deck).any()


def test_encode_deck():
    deck = Deck(seed=8)
    deck.shuffle()
    deck.deal(20)
    vec = encode_deck(deck)
    assert vec.shape == (D_TOTAL,)
    assert D_TOTAL == 104
    assert vec.sum() == 52.0
    assert vec[:52].sum() == 32.0
