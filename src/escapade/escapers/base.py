"""Shared machinery for the grammar escapers.

Holds the driver loop that turns decisions into output, the argument
handling shared by every public ``escape``/``escape_to`` pair, and the two
fallback tables several grammars have in common:

- markup_fallback: the HTML/XML handling of whitespace, printable ASCII,
  DEL, and the valid/invalid XML character ranges
- c_style_fallback: the JSON/Java/JavaScript ``\\uHHHH`` handling of
  controls and non-ASCII, splitting supplementary code points into a
  surrogate pair

"""

from collections.abc import Callable
from typing import Any

from escapade.actions import (
    DROP,
    PASS_THROUGH,
    Action,
    Drop,
    LiteralEscape,
    NumericEntity,
    render_action,
)
from escapade.config import resolve_options
from escapade.errors import InvalidArgumentError
from escapade.escapers.protocol import Sink
from escapade.options import Grammar
from escapade.source import CharInput, CodePointSource
from escapade.stringbuilder import StringBuilder
from escapade.utils.hexadecimal import hex4
from escapade.utils.logger import get_logger
from escapade.utils.surrogates import is_supplementary, split

logger = get_logger(__name__)

Decider = Callable[[int], Action]

# Writes a whole source to a sink under a resolved option set
SourceWriter = Callable[[CodePointSource, Sink, frozenset[Any]], None]


def check_sink(sink: Sink | None) -> None:
    if sink is None:
        raise InvalidArgumentError("sink must not be None")


def write_escaped(source: CodePointSource, sink: Sink, decide: Decider, grammar: Grammar) -> None:
    """Write every code point of source to sink as decided by decide.

    Exceptions raised by the sink propagate unchanged; fragments written
    before the failure stay written.
    """
    for cp in source:
        action = decide(cp)
        if isinstance(action, Drop):
            logger.debug("Dropped U+%04X: not representable in %s", cp, grammar.value)
            continue
        sink.write(render_action(action, cp))


def escape_text(
    writer: SourceWriter,
    grammar: Grammar,
    text: CharInput | None,
    options: Any,
    offset: int,
    length: int | None,
) -> str | None:
    """Run writer over text and return the escaped string.

    Returns:
        Escaped string, or None if text is None.
    """
    if text is None:
        return None
    source = CodePointSource(text, offset, length)
    resolved = resolve_options(options, grammar)
    sb = StringBuilder()
    writer(source, sb, resolved)
    return sb.build()


def escape_text_to(
    writer: SourceWriter,
    grammar: Grammar,
    text: CharInput | None,
    sink: Sink | None,
    options: Any,
    offset: int,
    length: int | None,
) -> None:
    """Run writer over text into sink.

    Raises:
        InvalidArgumentError: If sink is None (even when text is None).
        WindowError: If the offset/length window does not fit.
    """
    check_sink(sink)
    if text is None:
        return
    source = CodePointSource(text, offset, length)
    resolved = resolve_options(options, grammar)
    writer(source, sink, resolved)


# =============================================================================
# Markup (HTML / XML)
# =============================================================================


def is_markup_char(cp: int) -> bool:
    """Check whether a non-ASCII cp is a valid XML/HTML document character."""
    return 0x80 <= cp <= 0xD7FF or 0xE000 <= cp <= 0xFFFD or 0x10000 <= cp <= 0x10FFFF


def markup_fallback(cp: int, base: int, escape_non_ascii: bool) -> Action:
    """Decide cp for HTML and XML once entity lookups have missed."""
    match cp:
        case 0x09 | 0x0A | 0x0D:
            return PASS_THROUGH
        case _ if 0x20 <= cp <= 0x7E:
            return PASS_THROUGH
        case 0x7F:
            return NumericEntity(cp, base)
        case _ if is_markup_char(cp):
            return NumericEntity(cp, base) if escape_non_ascii else PASS_THROUGH
        case _:
            # C0 controls, lone surrogates, U+FFFE and U+FFFF
            return DROP


# =============================================================================
# C-style string literals (JSON / Java / JavaScript)
# =============================================================================


def unicode_escape(unit: int) -> str:
    return "\\u" + hex4(unit)


def utf16_escape(cp: int) -> str:
    """Escape cp as \\uHHHH, or as two escapes for a supplementary cp."""
    if is_supplementary(cp):
        high, low = split(cp)
        return unicode_escape(high) + unicode_escape(low)
    return unicode_escape(cp)


def literal_table(escapes: dict[int, str]) -> dict[int, Action]:
    """Prebuild LiteralEscape actions for a code point -> escape mapping."""
    return {cp: LiteralEscape(text) for cp, text in escapes.items()}


def c_style_fallback(cp: int, escape_non_ascii: bool) -> Action:
    """Decide cp for JSON, Java and JavaScript once literal escapes have missed."""
    if cp < 0x20 or cp == 0x7F:
        return LiteralEscape(unicode_escape(cp))
    if cp > 0x7F and escape_non_ascii:
        return LiteralEscape(utf16_escape(cp))
    return PASS_THROUGH
