"""JSON string escaper.

Escapes text for the inside of a JSON string literal (RFC 8259). The
surrounding double quotes are not added.

``"`` ``\\`` ``/`` and the five common controls get their two-character
escapes; every other control and DEL becomes ``\\uHHHH``. With
ESCAPE_NON_ASCII, every code point above 0x7F is written as ``\\uHHHH``
(supplementary code points as a surrogate pair of escapes). Nothing is
ever dropped.

Example:
    >>> from escapade.escapers import json
    >>> json.escape('He said "hi"/bye')
    'He said \\\\"hi\\\\"\\\\/bye'
    >>> json.escape("\\U0001D11E", JsonOption.ESCAPE_NON_ASCII)
    '\\\\uD834\\\\uDD1E'

"""

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from escapade.actions import Action
from escapade.config import resolve_options
from escapade.escapers.base import (
    Decider,
    c_style_fallback,
    escape_text,
    escape_text_to,
    literal_table,
    write_escaped,
)
from escapade.escapers.protocol import Sink
from escapade.options import Grammar, JsonOption
from escapade.source import CharInput, CodePointSource

GRAMMAR = Grammar.JSON
OPTION_TYPE = JsonOption

LITERAL_ESCAPES: Mapping[int, Action] = MappingProxyType(
    literal_table(
        {
            0x22: '\\"',
            0x5C: "\\\\",
            0x2F: "\\/",
            0x0A: "\\n",
            0x0D: "\\r",
            0x0C: "\\f",
            0x09: "\\t",
            0x08: "\\b",
        }
    )
)


@lru_cache(maxsize=None)
def _decider(options: frozenset[JsonOption]) -> Decider:
    escape_non_ascii = JsonOption.ESCAPE_NON_ASCII in options

    def decide(cp: int) -> Action:
        action = LITERAL_ESCAPES.get(cp)
        if action is not None:
            return action
        return c_style_fallback(cp, escape_non_ascii)

    return decide


def decide(cp: int, options: Any = None) -> Action:
    """Return the JSON escape decision for a single code point."""
    return _decider(resolve_options(options, GRAMMAR))(cp)


def _write(source: CodePointSource, sink: Sink, options: frozenset[JsonOption]) -> None:
    write_escaped(source, sink, _decider(options), GRAMMAR)


def escape(
    text: CharInput | None,
    options: Any = None,
    *,
    offset: int = 0,
    length: int | None = None,
) -> str | None:
    """Escape text for a JSON string literal.

    Args:
        text: String or sequence of characters (None propagates as None)
        options: JsonOption, iterable of JsonOption, or None for the
            configured defaults
        offset: Index of the first unit to escape
        length: Number of units to escape (None = through the end)

    Returns:
        Escaped string, or None if text is None.
    """
    return escape_text(_write, GRAMMAR, text, options, offset, length)


def escape_to(
    text: CharInput | None,
    sink: Sink,
    options: Any = None,
    *,
    offset: int = 0,
    length: int | None = None,
) -> None:
    """Escape text for a JSON string literal into sink."""
    escape_text_to(_write, GRAMMAR, text, sink, options, offset, length)
