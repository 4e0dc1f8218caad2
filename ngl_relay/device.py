"""Synthetic device identifiers for outbound submissions."""
import random
from typing import Optional

DEVICE_ID_LENGTH = 36
HYPHEN_POSITIONS = frozenset((8, 13, 18, 23))
DEVICE_ID_CHARS = "abcdefghijklmnopqrstuvwxyz0123456789"


def generate_device_id(rng: Optional[random.Random] = None) -> str:
    """Return a UUID-shaped token of lowercase letters and digits"""
    rng = rng or random
    return "".join(
        "-" if i in HYPHEN_POSITIONS else rng.choice(DEVICE_ID_CHARS)
        for i in range(DEVICE_ID_LENGTH)
    )
