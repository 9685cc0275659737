"""XML escaper.

Escapes text for XML 1.0 element content and attribute values using the
five predefined entities; there are no optional entity tiers.

``'`` ``"`` ``&`` ``<`` ``>`` become ``&apos;`` ``&quot;`` ``&amp;`` ``&lt;``
``&gt;``. Everything else follows the HTML rules: whitespace and printable
ASCII pass, DEL is a numeric reference, valid non-ASCII passes (or becomes a
numeric reference with ESCAPE_NON_ASCII), and characters XML 1.0 cannot
represent at all are dropped.

Example:
    >>> from escapade.escapers import xml
    >>> xml.escape("<a href='x'>")
    '&lt;a href=&apos;x&apos;&gt;'
    >>> xml.escape("caf\\u00e9", XmlOption.ESCAPE_NON_ASCII)
    'caf&#xE9;'

"""

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from escapade.actions import Action, NamedEntity
from escapade.config import resolve_options
from escapade.escapers.base import (
    Decider,
    escape_text,
    escape_text_to,
    markup_fallback,
    write_escaped,
)
from escapade.escapers.protocol import Sink
from escapade.options import Grammar, XmlOption
from escapade.source import CharInput, CodePointSource

GRAMMAR = Grammar.XML
OPTION_TYPE = XmlOption

# The predefined entities of XML 1.0 (section 4.6)
PREDEFINED_ENTITIES: Mapping[int, NamedEntity] = MappingProxyType(
    {
        0x27: NamedEntity("apos"),
        0x22: NamedEntity("quot"),
        0x26: NamedEntity("amp"),
        0x3C: NamedEntity("lt"),
        0x3E: NamedEntity("gt"),
    }
)


@lru_cache(maxsize=None)
def _decider(options: frozenset[XmlOption]) -> Decider:
    base = 10 if XmlOption.USE_DECIMAL in options else 16
    escape_non_ascii = XmlOption.ESCAPE_NON_ASCII in options

    def decide(cp: int) -> Action:
        entity = PREDEFINED_ENTITIES.get(cp)
        if entity is not None:
            return entity
        return markup_fallback(cp, base, escape_non_ascii)

    return decide


def decide(cp: int, options: Any = None) -> Action:
    """Return the XML escape decision for a single code point."""
    return _decider(resolve_options(options, GRAMMAR))(cp)


def _write(source: CodePointSource, sink: Sink, options: frozenset[XmlOption]) -> None:
    write_escaped(source, sink, _decider(options), GRAMMAR)


def escape(
    text: CharInput | None,
    options: Any = None,
    *,
    offset: int = 0,
    length: int | None = None,
) -> str | None:
    """Escape text for XML.

    Args:
        text: String or sequence of characters (None propagates as None)
        options: XmlOption, iterable of XmlOption, or None for the
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
    """Escape text for XML into sink."""
    escape_text_to(_write, GRAMMAR, text, sink, options, offset, length)
