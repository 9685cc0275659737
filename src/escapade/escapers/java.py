"""Java source escaper.

Escapes text for the inside of a Java string literal or text block.

Unlike JSON and JavaScript, ``/`` and ``'`` are left alone. With
ESCAPE_SPACE, space is written as ``\\s`` (only meaningful inside a text
block, where trailing spaces would otherwise be stripped).

Example:
    >>> from escapade.escapers import java
    >>> java.escape('say "hi"\\n')
    'say \\\\"hi\\\\"\\\\n'
    >>> java.escape("a b", JavaOption.ESCAPE_SPACE)
    'a\\\\sb'

"""

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from escapade.actions import Action, LiteralEscape
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
from escapade.options import Grammar, JavaOption
from escapade.source import CharInput, CodePointSource

GRAMMAR = Grammar.JAVA
OPTION_TYPE = JavaOption

LITERAL_ESCAPES: Mapping[int, Action] = MappingProxyType(
    literal_table(
        {
            0x22: '\\"',
            0x5C: "\\\\",
            0x0A: "\\n",
            0x0D: "\\r",
            0x0C: "\\f",
            0x09: "\\t",
            0x08: "\\b",
        }
    )
)

_SPACE = 0x20
_ESCAPED_SPACE = LiteralEscape("\\s")


@lru_cache(maxsize=None)
def _decider(options: frozenset[JavaOption]) -> Decider:
    escape_space = JavaOption.ESCAPE_SPACE in options
    escape_non_ascii = JavaOption.ESCAPE_NON_ASCII in options

    def decide(cp: int) -> Action:
        action = LITERAL_ESCAPES.get(cp)
        if action is not None:
            return action
        if cp == _SPACE and escape_space:
            return _ESCAPED_SPACE
        return c_style_fallback(cp, escape_non_ascii)

    return decide


def decide(cp: int, options: Any = None) -> Action:
    """Return the Java escape decision for a single code point."""
    return _decider(resolve_options(options, GRAMMAR))(cp)


def _write(source: CodePointSource, sink: Sink, options: frozenset[JavaOption]) -> None:
    write_escaped(source, sink, _decider(options), GRAMMAR)


def escape(
    text: CharInput | None,
    options: Any = None,
    *,
    offset: int = 0,
    length: int | None = None,
) -> str | None:
    """Escape text for Java source.

    Args:
        text: String or sequence of characters (None propagates as None)
        options: JavaOption, iterable of JavaOption, or None for the
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
    """Escape text for Java source into sink."""
    escape_text_to(_write, GRAMMAR, text, sink, options, offset, length)
