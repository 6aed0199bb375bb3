"""
Length measures used to size fragments and chunks.

Two measures are provided:
- characters: raw character count
- tokens: approximate token count (1 token ~ 4 characters)
"""

import math
from typing import Callable, Dict


CHARS_PER_TOKEN = 4


def character_length(text: str) -> int:
    """Return the character count of a fragment."""
    return len(text)


def approximate_token_length(text: str) -> int:
    """
    Approximate the token count of a fragment.

    Not tied to any tokenizer; it only has to be monotonic and cheap.

    Args:
        text: Fragment to measure

    Returns:
        ceil(len(text) / 4)
    """
    return math.ceil(len(text) / CHARS_PER_TOKEN)


LENGTH_MEASURES: Dict[str, Callable[[str], int]] = {
    'characters': character_length,
    'tokens': approximate_token_length,
}
