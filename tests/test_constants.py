import importlib

import card_deck.constants as constants


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CARD_DECK_SEED", "7")
    monkeypatch.setenv("CARD_DECK_DEMO_HANDS", "2")
    monkeypatch.setenv("CARD_DECK_DEMO_HAND_SIZE", " ")
    try:
        reloaded = importlib.reload(constants)
        assert reloaded.DEFAULT_SEED == 7
        assert reloaded.DEFAULT_DEMO_HANDS == 2
        # blank values fall back to the default
        assert reloaded.DEFAULT_DEMO_HAND_SIZE == 5
    finally:
        monkeypatch.undo()
        importlib.reload(constants)


def test_deck_size():
    assert constants.DECK_SIZE == 52
