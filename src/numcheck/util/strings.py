"""
String helpers shared by the identifier modules.

The normalizer is deliberately generic: it only strips cosmetic separators
and rejects characters that have no business in a typed-in number (control
characters, zero-width and bidi format marks, unassigned code points).
Length and alphabet checks belong to the individual identifier modules.
"""

from __future__ import annotations

import unicodedata
from typing import List

from ..exceptions import InvalidFormat

# Dash and space look-alikes that users paste from word processors and web pages.
_SEPARATOR_LOOKALIKES = str.maketrans(
    {
        "\u2010": "-",  # hyphen
        "\u2011": "-",  # non-breaking hyphen
        "\u2012": "-",  # figure dash
        "\u2013": "-",  # en dash
        "\u2014": "-",  # em dash
        "\u2015": "-",  # horizontal bar
        "\u2212": "-",  # minus sign
        "\uFE63": "-",  # small hyphen-minus
        "\uFF0D": "-",  # fullwidth hyphen-minus
        "\u00A0": " ",  # no-break space
        "\u2007": " ",  # figure space
        "\u202F": " ",  # narrow no-break space
        "\u3000": " ",  # ideographic space
    }
)

_UNSAFE_CATEGORIES = frozenset({"Cc", "Cf", "Cs", "Co", "Cn", "Zl", "Zp"})

_ASCII_DIGITS = frozenset("0123456789")


def is_unsafe(ch: str) -> bool:
    """True for control, format, surrogate, private-use and unassigned characters."""
    return unicodedata.category(ch) in _UNSAFE_CATEGORIES


def clean(value: str, deletechars: str = " ") -> str:
    """Remove every character in ``deletechars`` from ``value``."""
    return value.translate(str.maketrans("", "", deletechars))


def _fold(value: str) -> str:
    return value.translate(_SEPARATOR_LOOKALIKES)


def clean_unicode(value: str, deletechars: str = " ") -> str:
    """
    Normalize raw user input into a compact string.

    Dash and space look-alikes are mapped to their ASCII forms first so that
    the separators in ``deletechars`` are recognised in whatever form they
    were typed. Every other character is kept as is; fullwidth or
    superscript digits are left for the caller's alphabet check to reject.

    Raises:
        InvalidFormat: the cleaned value still contains an unsafe character.
    """
    result = clean(_fold(value), deletechars)
    if any(is_unsafe(ch) for ch in result):
        raise InvalidFormat()
    return result


def drop_unsafe(value: str, deletechars: str = " ") -> str:
    """Like :func:`clean_unicode`, but silently removes unsafe characters."""
    return "".join(ch for ch in clean(_fold(value), deletechars) if not is_unsafe(ch))


def isdigits(value: str) -> bool:
    """
    True if ``value`` is non-empty and made of ASCII digits only.

    ``str.isdigit`` also accepts Thai, Arabic-Indic and superscript digits,
    which checksum code cannot interpret.
    """
    return bool(value) and all(ch in _ASCII_DIGITS for ch in value)


def split_at(value: str, *points: int) -> List[str]:
    """
    Split ``value`` at the given offsets.

    ``split_at("abcdef", 1, 3)`` gives ``["a", "bc", "def"]``. Offsets past the
    end of the string yield shorter or empty trailing parts; nothing raises.
    """
    parts: List[str] = []
    last = 0
    for pos in points:
        parts.append(value[last:pos])
        last = max(last, pos)
    parts.append(value[last:])
    return parts
