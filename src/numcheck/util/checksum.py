"""
Generic positional checksum helpers.

Many national identifiers end in a check digit computed as a weighted sum of
the preceding characters reduced modulo some base. This module holds that
arithmetic once so each identifier module only supplies its weights and
modulus.
"""

from __future__ import annotations

from typing import Sequence

DIGITS = "0123456789"


def weighted_sum(
    value: str,
    weights: Sequence[int],
    modulus: int,
    alphabet: str = DIGITS,
    reverse: bool = False,
) -> int:
    """
    Return ``sum(value[i] * weights[i]) % modulus``.

    Each character is mapped to its index in ``alphabet`` (so ``"7"`` is 7 with
    the default digit alphabet). Weights are paired left to right; when the
    value is longer than ``weights`` they are cycled, and surplus weights are
    simply unused.

    Args:
        value:    Characters to sum. Must already be validated by the caller.
        weights:  Per-position multipliers.
        modulus:  Base the sum is reduced by; result is in ``[0, modulus)``.
        alphabet: Character set whose indexes are the character values.
        reverse:  Pair weights starting from the right-most character.

    Raises:
        ValueError: empty weights, non-positive modulus, or a character that
            is not part of ``alphabet``.
    """
    if not weights:
        raise ValueError("weights must not be empty")
    if modulus <= 0:
        raise ValueError("modulus must be positive")

    chars = reversed(value) if reverse else iter(value)
    wlen = len(weights)
    total = 0
    for i, ch in enumerate(chars):
        n = alphabet.find(ch)
        if n < 0:
            raise ValueError(f"character {ch!r} is not in the checksum alphabet")
        total += n * weights[i % wlen]

    return total % modulus
