"""HTML escaper.

Escapes text for use as HTML element content or a quoted attribute value.

Decision order per code point, highest priority first:

1. ``"`` ``&`` ``<`` ``>`` become ``&quot;`` ``&amp;`` ``&lt;`` ``&gt;``
2. With USE_ISO_LATIN_1_ENTITIES, 0xA0-0xFF become named entities
3. With USE_HTML4_EXTENDED_ENTITIES, HTML 4 symbols become named entities
4. ``'`` becomes ``&#x27;`` (``&#39;`` with USE_DECIMAL)
5. Tab, LF, CR and printable ASCII pass through
6. DEL (0x7F) becomes a numeric reference
7. Valid non-ASCII characters pass through, or become numeric references
   with ESCAPE_NON_ASCII
8. Everything else (C0 controls, lone surrogates, U+FFFE, U+FFFF) is dropped

Example:
    >>> from escapade.escapers import html
    >>> html.escape("a<b>c\\"d'e&f")
    'a&lt;b&gt;c&quot;d&#x27;e&amp;f'
    >>> html.escape("\\u00a3", HtmlOption.USE_ISO_LATIN_1_ENTITIES)
    '&pound;'

"""

from functools import lru_cache
from typing import Any

from escapade.actions import Action, NamedEntity, NumericEntity
from escapade.config import resolve_options
from escapade.entities import lookup_entity
from escapade.escapers.base import (
    Decider,
    escape_text,
    escape_text_to,
    markup_fallback,
    write_escaped,
)
from escapade.escapers.protocol import Sink
from escapade.options import Grammar, HtmlOption
from escapade.source import CharInput, CodePointSource

GRAMMAR = Grammar.HTML
OPTION_TYPE = HtmlOption

_APOSTROPHE = 0x27


@lru_cache(maxsize=None)
def _decider(options: frozenset[HtmlOption]) -> Decider:
    base = 10 if HtmlOption.USE_DECIMAL in options else 16
    escape_non_ascii = HtmlOption.ESCAPE_NON_ASCII in options
    latin1 = HtmlOption.USE_ISO_LATIN_1_ENTITIES in options
    extended = HtmlOption.USE_HTML4_EXTENDED_ENTITIES in options

    def decide(cp: int) -> Action:
        name = lookup_entity(cp, latin1=latin1, extended=extended)
        if name is not None:
            return NamedEntity(name)
        if cp == _APOSTROPHE:
            # No named entity for ' in HTML 4
            return NumericEntity(cp, base)
        return markup_fallback(cp, base, escape_non_ascii)

    return decide


def decide(cp: int, options: Any = None) -> Action:
    """Return the HTML escape decision for a single code point."""
    return _decider(resolve_options(options, GRAMMAR))(cp)


def _write(source: CodePointSource, sink: Sink, options: frozenset[HtmlOption]) -> None:
    write_escaped(source, sink, _decider(options), GRAMMAR)


def escape(
    text: CharInput | None,
    options: Any = None,
    *,
    offset: int = 0,
    length: int | None = None,
) -> str | None:
    """Escape text for HTML.

    Args:
        text: String or sequence of characters (None propagates as None)
        options: HtmlOption, iterable of HtmlOption, or None for the
            configured defaults
        offset: Index of the first unit to escape
        length: Number of units to escape (None = through the end)

    Returns:
        Escaped string, or None if text is None.

    Raises:
        WindowError: If the offset/length window does not fit inside text.
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
    """Escape text for HTML into sink.

    The sink is written to but never closed.

    Raises:
        InvalidArgumentError: If sink is None.
        WindowError: If the offset/length window does not fit inside text.
    """
    escape_text_to(_write, GRAMMAR, text, sink, options, offset, length)
