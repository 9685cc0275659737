"""CSV field escaper (RFC 4180).

A field is escaped in two passes over its code points. The first pass
doubles every ``"`` into a buffer and notes whether the field contains a
comma, LF or CR. Only once the whole field has been seen does the second
step decide whether the buffer needs to be wrapped in double quotes.

CSV has no options. An empty option set (or None) is accepted; anything
else is rejected with InvalidArgumentError.

Example:
    >>> from escapade.escapers import csv
    >>> csv.escape("foo,bar")
    '"foo,bar"'
    >>> csv.escape('foo"bar')
    '"foo""bar"'
    >>> csv.escape("foo.bar")
    'foo.bar'

"""

from typing import Any

from escapade.actions import PASS_THROUGH, Action, LiteralEscape, render_action
from escapade.config import resolve_options
from escapade.escapers.base import escape_text, escape_text_to
from escapade.escapers.protocol import Sink
from escapade.options import CsvOption, Grammar
from escapade.source import CharInput, CodePointSource
from escapade.stringbuilder import StringBuilder

GRAMMAR = Grammar.CSV
OPTION_TYPE = CsvOption

QUOTE = '"'

_QUOTE_CP = 0x22
_DOUBLED_QUOTE = LiteralEscape('""')

# Characters that force the field to be quoted
_QUOTE_TRIGGERS = frozenset({0x22, 0x2C, 0x0A, 0x0D})


def decide(cp: int, options: Any = None) -> Action:
    """Return the CSV escape decision for a single code point.

    Only ``"`` is ever rewritten; whether the field gets wrapped in quotes
    is decided per field by requires_quotes.
    """
    resolve_options(options, GRAMMAR)
    return _decide(cp)


def _decide(cp: int) -> Action:
    return _DOUBLED_QUOTE if cp == _QUOTE_CP else PASS_THROUGH


def requires_quotes(text: CharInput) -> bool:
    """Check whether a field must be wrapped in double quotes.

    Examples:
        >>> requires_quotes("a,b")
        True
        >>> requires_quotes("a b")
        False
    """
    return any(cp in _QUOTE_TRIGGERS for cp in CodePointSource(text))


def _write(source: CodePointSource, sink: Sink, options: frozenset[CsvOption]) -> None:
    buffer = StringBuilder()
    quoted = False
    for cp in source:
        if cp in _QUOTE_TRIGGERS:
            quoted = True
        buffer.append(render_action(_decide(cp), cp))
    if quoted:
        sink.write(QUOTE)
        sink.write(buffer.build())
        sink.write(QUOTE)
    else:
        sink.write(buffer.build())


def escape(
    text: CharInput | None,
    options: Any = None,
    *,
    offset: int = 0,
    length: int | None = None,
) -> str | None:
    """Escape a single CSV field.

    Args:
        text: String or sequence of characters (None propagates as None)
        options: Must be None or empty
        offset: Index of the first unit to escape
        length: Number of units to escape (None = through the end)

    Returns:
        Escaped field, or None if text is None.
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
    """Escape a single CSV field into sink.

    Nothing reaches the sink until the whole field has been scanned.
    """
    escape_text_to(_write, GRAMMAR, text, sink, options, offset, length)
