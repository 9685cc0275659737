"""YAML scalar escaper.

YAML is the one grammar where no character can be escaped on its own: the
quoting style of the whole scalar decides which escapes exist at all. So
escaping runs in two phases.

Phase 1 (requires_quotes) scans the entire input and picks a Quoting:

- NONE: plain scalar, written verbatim
- SINGLE: ``'...'``, written verbatim between the quotes (only chosen when
  nothing inside needs an escape)
- DOUBLE: ``"..."`` with backslash escapes

Phase 2 renders the input in the chosen style. It never starts before
phase 1 has seen every code point.

Example:
    >>> from escapade.escapers import yaml
    >>> yaml.escape("abc")
    'abc'
    >>> yaml.escape("ab#c")
    "'ab#c'"
    >>> yaml.escape("a\\tb")
    '"a\\\\tb"'
    >>> yaml.requires_quotes("") is yaml.Quoting.SINGLE
    True

"""

from collections.abc import Mapping
from enum import Enum, auto
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from escapade.actions import PASS_THROUGH, Action, LiteralEscape, render_action
from escapade.config import resolve_options
from escapade.escapers.base import Decider, escape_text, escape_text_to, literal_table
from escapade.escapers.protocol import Sink
from escapade.options import Grammar, YamlOption
from escapade.source import CharInput, CodePointSource
from escapade.utils.hexadecimal import hex2, hex4, hex8

GRAMMAR = Grammar.YAML
OPTION_TYPE = YamlOption


class Quoting(Enum):
    """Quoting style of a YAML scalar."""

    NONE = auto()
    SINGLE = auto()
    DOUBLE = auto()


# Indicator characters that make a plain scalar ambiguous
SPECIAL_CHARS = "#,[]{}&*!|>%@?:-/"
DOCUMENT_START = "---"
DOCUMENT_END = "..."

_SPECIAL_CPS = frozenset(map(ord, SPECIAL_CHARS))
_DOCUMENT_START_CPS = [ord(c) for c in DOCUMENT_START]
_DOCUMENT_END_CPS = [ord(c) for c in DOCUMENT_END]
_SPACE = 0x20

# Characters only a double-quoted scalar can carry
_DOUBLE_TRIGGERS = frozenset({0x22, 0x2F, 0x5C, 0x7F, 0x85, 0xA0, 0x2028, 0x2029})

# Short escapes of the double-quoted style (YAML 1.2 section 5.7)
NAMED_ESCAPES: Mapping[int, Action] = MappingProxyType(
    literal_table(
        {
            0x00: "\\0",
            0x07: "\\a",
            0x08: "\\b",
            0x09: "\\t",
            0x0A: "\\n",
            0x0B: "\\v",
            0x0C: "\\f",
            0x0D: "\\r",
            0x22: '\\"',
            0x2F: "\\/",
            0x5C: "\\\\",
            0x85: "\\N",
            0xA0: "\\_",
            0x2028: "\\L",
            0x2029: "\\P",
        }
    )
)


def _requires_quotes(cps: list[int], escape_non_ascii: bool) -> Quoting:
    if not cps:
        return Quoting.SINGLE

    needs_single = (
        cps[0] == _SPACE
        or cps[-1] == _SPACE
        or cps[:3] == _DOCUMENT_START_CPS
        or cps[-3:] == _DOCUMENT_END_CPS
    )

    for cp in cps:
        if cp in _SPECIAL_CPS:
            needs_single = True
        elif cp < 0x20 or cp in _DOUBLE_TRIGGERS:
            return Quoting.DOUBLE
        elif cp > 0x7F and escape_non_ascii:
            return Quoting.DOUBLE

    return Quoting.SINGLE if needs_single else Quoting.NONE


def requires_quotes(text: CharInput, escape_non_ascii: bool = False) -> Quoting:
    """Decide how a scalar must be quoted.

    Double quoting wins as soon as any character needs an escape. Otherwise
    the scalar is single quoted if it is empty, starts or ends with a space,
    looks like a document marker, or contains an indicator character.

    Args:
        text: String or sequence of characters
        escape_non_ascii: Whether non-ASCII characters will be escaped

    Returns:
        The Quoting to render text with.

    Examples:
        >>> requires_quotes("ab#c") is Quoting.SINGLE
        True
        >>> requires_quotes("\\u0123", escape_non_ascii=True) is Quoting.DOUBLE
        True
    """
    return _requires_quotes(CodePointSource(text).code_points(), escape_non_ascii)


@lru_cache(maxsize=None)
def _decider(options: frozenset[YamlOption]) -> Decider:
    escape_non_ascii = YamlOption.ESCAPE_NON_ASCII in options

    def decide(cp: int) -> Action:
        action = NAMED_ESCAPES.get(cp)
        if action is not None:
            return action
        if cp < 0x20 or cp == 0x7F:
            return LiteralEscape("\\x" + hex2(cp))
        if cp <= 0x7E or not escape_non_ascii:
            return PASS_THROUGH
        if cp <= 0xFF:
            return LiteralEscape("\\x" + hex2(cp))
        if cp <= 0xFFFF:
            return LiteralEscape("\\u" + hex4(cp))
        return LiteralEscape("\\U" + hex8(cp))

    return decide


def decide(cp: int, options: Any = None) -> Action:
    """Return the decision for cp inside a double-quoted scalar.

    Plain and single-quoted scalars never escape anything; see
    requires_quotes for when each style is used.
    """
    return _decider(resolve_options(options, GRAMMAR))(cp)


def _write(source: CodePointSource, sink: Sink, options: frozenset[YamlOption]) -> None:
    # Phase 1 needs the whole input before anything is written
    cps = source.code_points()
    quoting = _requires_quotes(cps, YamlOption.ESCAPE_NON_ASCII in options)

    if quoting is Quoting.NONE:
        sink.write("".join(map(chr, cps)))
        return
    if quoting is Quoting.SINGLE:
        sink.write("'")
        sink.write("".join(map(chr, cps)))
        sink.write("'")
        return

    decide_cp = _decider(options)
    sink.write('"')
    for cp in cps:
        sink.write(render_action(decide_cp(cp), cp))
    sink.write('"')


def escape(
    text: CharInput | None,
    options: Any = None,
    *,
    offset: int = 0,
    length: int | None = None,
) -> str | None:
    """Escape text as a YAML scalar, adding quotes where needed.

    Args:
        text: String or sequence of characters (None propagates as None)
        options: YamlOption, iterable of YamlOption, or None for the
            configured defaults
        offset: Index of the first unit to escape
        length: Number of units to escape (None = through the end)

    Returns:
        Escaped scalar, or None if text is None.
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
    """Escape text as a YAML scalar into sink."""
    escape_text_to(_write, GRAMMAR, text, sink, options, offset, length)
