"""Numeric formatting helpers shared by every escaper.

Fixed-width helpers truncate bits beyond their field width, so callers that
need a full value must pick a wide enough helper.

Example:
    >>> from escapade.utils.hexadecimal import hex2, hex4, hex_variable
    >>> hex2(0x1F)
    '1F'
    >>> hex4(0xE9)
    '00E9'
    >>> hex_variable(0x1F603)
    '1F603'
"""

from __future__ import annotations


def hex2(value: int) -> str:
    """Format the low byte of value as exactly two uppercase hex digits.

    Examples:
        >>> hex2(0x0)
        '00'
        >>> hex2(0x1FF)
        'FF'
    """
    return f"{value & 0xFF:02X}"


def hex4(value: int) -> str:
    """Format the low 16 bits of value as exactly four uppercase hex digits.

    Examples:
        >>> hex4(0x1FF)
        '01FF'
        >>> hex4(0x1FEDC)
        'FEDC'
    """
    return f"{value & 0xFFFF:04X}"


def hex8(value: int) -> str:
    """Format the low 32 bits of value as exactly eight uppercase hex digits.

    Examples:
        >>> hex8(0x1F603)
        '0001F603'
    """
    return f"{value & 0xFFFFFFFF:08X}"


def hex_variable(value: int) -> str:
    """Format value as the shortest uppercase hex string, without padding.

    Examples:
        >>> hex_variable(0)
        '0'
        >>> hex_variable(0xA3)
        'A3'
    """
    return f"{value:X}"


def decimal(value: int) -> str:
    """Format value as a base-10 digit string."""
    return str(value)


__all__ = ["decimal", "hex2", "hex4", "hex8", "hex_variable"]
