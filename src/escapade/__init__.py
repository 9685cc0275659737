"""
Escapade: Text Escaping for Seven Output Grammars

Escapes text for CSV, HTML, Java, JavaScript, JSON, XML and YAML. Every
code point that is significant or invalid in the target grammar is
replaced with that grammar's escape form; everything else passes through
unchanged. Zero runtime dependencies.

Quick Start:
    >>> from escapade import escape
    >>> escape("<a href='x'>", "html")
    '&lt;a href=&#x27;x&#x27;&gt;'
    >>> escape("foo,bar", "csv")
    '"foo,bar"'

    >>> # Options are per-grammar enums
    >>> from escapade import JsonOption
    >>> escape("caf\\u00e9", "json", JsonOption.ESCAPE_NON_ASCII)
    'caf\\\\u00E9'

Streaming:
    >>> import io
    >>> out = io.StringIO()
    >>> escape_to("a < b", out, "xml")
    >>> out.getvalue()
    'a &lt; b'

Reusable Escapers:
    >>> from escapade import Escaper, HtmlOption
    >>> esc = Escaper("html", HtmlOption.USE_DECIMAL)
    >>> esc("it's")
    'it&#39;s'
"""

from collections.abc import Iterable
from typing import Any

from escapade.actions import (
    DROP,
    PASS_THROUGH,
    Action,
    Drop,
    LiteralEscape,
    NamedEntity,
    NumericEntity,
    PassThrough,
    render_action,
)
from escapade.config import (
    EscapeConfig,
    escape_config_context,
    get_escape_config,
    reset_escape_config,
    resolve_options,
    set_escape_config,
)
from escapade.errors import (
    EscapadeError,
    InvalidArgumentError,
    UnknownOptionError,
    WindowError,
)
from escapade.escapers import ESCAPERS
from escapade.escapers.base import check_sink
from escapade.escapers.protocol import GrammarEscaper, Sink
from escapade.escapers.yaml import Quoting
from escapade.options import (
    CsvOption,
    Grammar,
    HtmlOption,
    JavaOption,
    JavaScriptOption,
    JsonOption,
    XmlOption,
    YamlOption,
    options_from_names,
    to_grammar,
)
from escapade.source import CharInput, CodePointSource
from escapade.stringbuilder import StringBuilder

__version__ = "0.1.0"


def get_escaper(grammar: Grammar | str) -> GrammarEscaper:
    """Return the escaper module for grammar.

    Raises:
        InvalidArgumentError: If grammar names no supported grammar.
    """
    return ESCAPERS[to_grammar(grammar)]


def escape(
    text: CharInput | None,
    grammar: Grammar | str,
    options: Any = None,
    *,
    offset: int = 0,
    length: int | None = None,
) -> str | None:
    """Escape text for grammar.

    Args:
        text: String or sequence of characters (None propagates as None)
        grammar: Grammar member or name ("html", "json", ...)
        options: Option member or iterable of members for that grammar, or
            None for the configured defaults
        offset: Index of the first unit to escape
        length: Number of units to escape (None = through the end)

    Returns:
        Escaped string, or None if text is None.

    Raises:
        InvalidArgumentError: Unknown grammar or options of another grammar.
        WindowError: If the offset/length window does not fit inside text.

    Example:
        >>> escape("a\\"b", "yaml")
        '"a\\\\"b"'
    """
    return get_escaper(grammar).escape(text, options, offset=offset, length=length)


def escape_to(
    text: CharInput | None,
    sink: Sink,
    grammar: Grammar | str,
    options: Any = None,
    *,
    offset: int = 0,
    length: int | None = None,
) -> None:
    """Escape text for grammar into sink.

    The sink is checked before anything else, so a None sink is rejected
    even when text is None. The sink is never closed.

    Raises:
        InvalidArgumentError: If sink is None, or on an unknown grammar.
        WindowError: If the offset/length window does not fit inside text.
    """
    check_sink(sink)
    get_escaper(grammar).escape_to(text, sink, options, offset=offset, length=length)


class Escaper:
    """Reusable escaper bound to one grammar and option set.

    The option set is resolved once, at construction: passing None snapshots
    the active EscapeConfig defaults, so later config changes do not affect
    an existing Escaper.

    Usage:
        >>> esc = Escaper("json")
        >>> esc('say "hi"')
        'say \\\\"hi\\\\"'

        >>> esc.escape_many(["a/b", None])
        ['a\\\\/b', None]

    Thread Safety:
        Immutable after construction. Safe to share between threads.

    """

    __slots__ = ("_escaper", "_grammar", "_options")

    def __init__(self, grammar: Grammar | str, options: Any = None) -> None:
        """Initialize escaper.

        Args:
            grammar: Grammar member or name
            options: Option member or iterable of members, or None for the
                currently configured defaults

        Raises:
            InvalidArgumentError: Unknown grammar or options of another grammar.
        """
        self._grammar = to_grammar(grammar)
        self._escaper = ESCAPERS[self._grammar]
        self._options = resolve_options(options, self._grammar)

    @property
    def grammar(self) -> Grammar:
        return self._grammar

    @property
    def options(self) -> frozenset[Any]:
        return self._options

    def __call__(
        self,
        text: CharInput | None,
        *,
        offset: int = 0,
        length: int | None = None,
    ) -> str | None:
        """Escape text and return the result (None for None input)."""
        return self._escaper.escape(text, self._options, offset=offset, length=length)

    def write(
        self,
        text: CharInput | None,
        sink: Sink,
        *,
        offset: int = 0,
        length: int | None = None,
    ) -> None:
        """Escape text into sink (no-op for None input)."""
        self._escaper.escape_to(text, sink, self._options, offset=offset, length=length)

    def escape_many(self, texts: Iterable[CharInput | None]) -> list[str | None]:
        """Escape every text in order.

        Args:
            texts: Iterable of strings or character sequences

        Returns:
            List of escaped strings (None where the input was None)
        """
        escape_one = self._escaper.escape
        options = self._options
        return [escape_one(text, options) for text in texts]

    def __repr__(self) -> str:
        names = ", ".join(sorted(o.name for o in self._options))
        return f"Escaper({self._grammar.value!r}, {{{names}}})"


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "Escaper",
    "escape",
    "escape_to",
    "get_escaper",
    # Grammars and options
    "CsvOption",
    "Grammar",
    "HtmlOption",
    "JavaOption",
    "JavaScriptOption",
    "JsonOption",
    "XmlOption",
    "YamlOption",
    "options_from_names",
    "Quoting",
    # Escape decisions
    "Action",
    "DROP",
    "Drop",
    "LiteralEscape",
    "NamedEntity",
    "NumericEntity",
    "PASS_THROUGH",
    "PassThrough",
    "render_action",
    # Escaper components
    "ESCAPERS",
    "CharInput",
    "CodePointSource",
    "GrammarEscaper",
    "Sink",
    "StringBuilder",
    # Configuration
    "EscapeConfig",
    "escape_config_context",
    "get_escape_config",
    "reset_escape_config",
    "set_escape_config",
    # Errors
    "EscapadeError",
    "InvalidArgumentError",
    "UnknownOptionError",
    "WindowError",
]
