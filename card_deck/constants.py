import os
from dotenv import load_dotenv

load_dotenv(override=True)

DECK_SIZE = 52


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


DEFAULT_SEED = _env_int("CARD_DECK_SEED", None)
DEFAULT_DEMO_HANDS = _env_int("CARD_DECK_DEMO_HANDS", 4)
DEFAULT_DEMO_HAND_SIZE = _env_int("CARD_DECK_DEMO_HAND_SIZE", 5)
