"""UTF-16 surrogate helpers.

Python strings iterate by code point, but text that went through a UTF-16
system (JSON with ``\\uD83D\\uDE03`` escapes, Java or JavaScript strings,
``surrogatepass`` decoding) can still carry a supplementary character as two
separate surrogate code points. These helpers combine such pairs and split
supplementary code points back into their two units for grammars that only
have a four-digit escape.

Example:
    >>> from escapade.utils.surrogates import combine, split
    >>> hex(combine(0xD83D, 0xDE03))
    '0x1f603'
    >>> [hex(unit) for unit in split(0x1F603)]
    ['0xd83d', '0xde03']
"""

from __future__ import annotations

MIN_HIGH_SURROGATE = 0xD800
MAX_HIGH_SURROGATE = 0xDBFF
MIN_LOW_SURROGATE = 0xDC00
MAX_LOW_SURROGATE = 0xDFFF
MIN_SUPPLEMENTARY = 0x10000
MAX_CODE_POINT = 0x10FFFF


def is_high_surrogate(unit: int) -> bool:
    return MIN_HIGH_SURROGATE <= unit <= MAX_HIGH_SURROGATE


def is_low_surrogate(unit: int) -> bool:
    return MIN_LOW_SURROGATE <= unit <= MAX_LOW_SURROGATE


def is_surrogate(unit: int) -> bool:
    return MIN_HIGH_SURROGATE <= unit <= MAX_LOW_SURROGATE


def is_supplementary(cp: int) -> bool:
    """Check whether cp lies outside the Basic Multilingual Plane."""
    return MIN_SUPPLEMENTARY <= cp <= MAX_CODE_POINT


def combine(high: int, low: int) -> int:
    """Combine a high and a low surrogate into one supplementary code point.

    The caller is responsible for checking both halves first.
    """
    return MIN_SUPPLEMENTARY + ((high - MIN_HIGH_SURROGATE) << 10) + (low - MIN_LOW_SURROGATE)


def split(cp: int) -> tuple[int, int]:
    """Split a supplementary code point into its (high, low) UTF-16 units.

    Raises:
        ValueError: If cp is not a supplementary code point.
    """
    if not is_supplementary(cp):
        raise ValueError(f"U+{cp:04X} is not a supplementary code point")
    offset = cp - MIN_SUPPLEMENTARY
    return MIN_HIGH_SURROGATE + (offset >> 10), MIN_LOW_SURROGATE + (offset & 0x3FF)


__all__ = [
    "MAX_CODE_POINT",
    "MIN_SUPPLEMENTARY",
    "combine",
    "is_high_surrogate",
    "is_low_surrogate",
    "is_supplementary",
    "is_surrogate",
    "split",
]
