"""Protocols for escapers and output sinks.

Every grammar module in ``escapade.escapers`` conforms to ``GrammarEscaper``
(modules satisfy protocols structurally), and any object with a
``write(str)`` method is a ``Sink``: ``io.StringIO``, an open text file,
``sys.stdout`` or ``escapade.stringbuilder.StringBuilder``.

Example:
    from escapade.escapers.protocol import GrammarEscaper

    def escape_all(escaper: GrammarEscaper, values: list[str]) -> list[str]:
        return [escaper.escape(v) for v in values]

"""

from enum import Enum
from typing import Any, Protocol

from escapade.actions import Action
from escapade.options import Grammar
from escapade.source import CharInput


class Sink(Protocol):
    """Destination for escaped text. Escapers write to it but never close it."""

    def write(self, s: str, /) -> Any: ...


class GrammarEscaper(Protocol):
    """Protocol for per-grammar escaping modules.

    Attributes:
        GRAMMAR: The grammar this escaper targets
        OPTION_TYPE: The grammar's option enum

    """

    GRAMMAR: Grammar
    OPTION_TYPE: type[Enum]

    def decide(self, cp: int, options: Any = None) -> Action:
        """Return the escape decision for a single code point."""
        ...

    def escape(
        self,
        text: CharInput | None,
        options: Any = None,
        *,
        offset: int = 0,
        length: int | None = None,
    ) -> str | None:
        """Escape text and return the result (None for None input)."""
        ...

    def escape_to(
        self,
        text: CharInput | None,
        sink: Sink,
        options: Any = None,
        *,
        offset: int = 0,
        length: int | None = None,
    ) -> None:
        """Escape text into sink (no-op for None input)."""
        ...
