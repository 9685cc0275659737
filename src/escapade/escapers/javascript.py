"""JavaScript (ECMAScript) string escaper.

Escapes text for the inside of a JavaScript string literal. Both ``"`` and
``'`` are escaped because the surrounding quote character is not known,
and ``/`` is escaped so the output can sit inside an inline ``<script>``
block without closing it.

Example:
    >>> from escapade.escapers import javascript
    >>> javascript.escape("it's </b>")
    "it\\\\'s <\\\\/b>"

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
from escapade.options import Grammar, JavaScriptOption
from escapade.source import CharInput, CodePointSource

GRAMMAR = Grammar.JAVASCRIPT
OPTION_TYPE = JavaScriptOption

LITERAL_ESCAPES: Mapping[int, Action] = MappingProxyType(
    literal_table(
        {
            0x22: '\\"',
            0x27: "\\'",
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
def _decider(options: frozenset[JavaScriptOption]) -> Decider:
    escape_non_ascii = JavaScriptOption.ESCAPE_NON_ASCII in options

    def decide(cp: int) -> Action:
        action = LITERAL_ESCAPES.get(cp)
        if action is not None:
            return action
        return c_style_fallback(cp, escape_non_ascii)

    return decide


def decide(cp: int, options: Any = None) -> Action:
    """Return the JavaScript escape decision for a single code point."""
    return _decider(resolve_options(options, GRAMMAR))(cp)


def _write(source: CodePointSource, sink: Sink, options: frozenset[JavaScriptOption]) -> None:
    write_escaped(source, sink, _decider(options), GRAMMAR)


def escape(
    text: CharInput | None,
    options: Any = None,
    *,
    offset: int = 0,
    length: int | None = None,
) -> str | None:
    """Escape text for a JavaScript string literal.

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
    """Escape text for a JavaScript string literal into sink."""
    escape_text_to(_write, GRAMMAR, text, sink, options, offset, length)
