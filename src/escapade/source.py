"""Code point iteration over strings and character sequences.

A ``CodePointSource`` gives every escaper the same view of its input,
whether the caller passed a ``str`` or a list of one-character strings, and
whether or not an ``(offset, length)`` window was requested.

Surrogate pairs that arrive as two separate code units (for instance text
decoded with ``surrogatepass`` or built from JSON ``\\uD83D\\uDE03`` escapes)
are combined into a single supplementary code point. An unpaired surrogate
is yielded unchanged; each escaper decides whether it can be represented.

Example:
    >>> from escapade.source import CodePointSource
    >>> [hex(cp) for cp in CodePointSource("a\\ud83d\\ude03")]
    ['0x61', '0x1f603']
    >>> list(CodePointSource("Hello", offset=1, length=3))
    [101, 108, 108]
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from escapade.errors import WindowError
from escapade.utils.surrogates import combine, is_high_surrogate, is_low_surrogate

# Anything indexable by position that yields one-character strings
CharInput = str | Sequence[str]


class CodePointSource:
    """Windowed code point view of a string or character sequence.

    Indices and lengths are measured in units of the underlying sequence,
    so a pre-split surrogate pair occupies two positions.

    Thread Safety:
        Instances are read-only after construction. The underlying sequence
        must not be mutated while it is being escaped.

    """

    __slots__ = ("_chars", "_end", "_start")

    def __init__(self, chars: CharInput, offset: int = 0, length: int | None = None) -> None:
        """Create a view of chars[offset:offset + length].

        Args:
            chars: String or sequence of one-character strings
            offset: Index of the first unit to include
            length: Number of units to include (None = through the end)

        Raises:
            WindowError: If the window does not fit inside chars.
        """
        size = len(chars)
        if length is None:
            length = size - offset
        if offset < 0 or length < 0 or offset + length > size:
            raise WindowError(offset, length, size)
        self._chars = chars
        self._start = offset
        self._end = offset + length

    def __len__(self) -> int:
        """Return the window size in units (not code points)."""
        return self._end - self._start

    def code_point_at(self, index: int) -> tuple[int, int]:
        """Return the code point at index and the number of units it spans.

        Width is 2 only when the unit at index is a high surrogate followed
        by a low surrogate that is also inside the window.

        Raises:
            WindowError: If index is outside the window.
        """
        if index < 0 or index >= len(self):
            raise WindowError(index, 1, len(self))
        pos = self._start + index
        unit = ord(self._chars[pos])
        if is_high_surrogate(unit) and pos + 1 < self._end:
            low = ord(self._chars[pos + 1])
            if is_low_surrogate(low):
                return combine(unit, low), 2
        return unit, 1

    def __iter__(self) -> Iterator[int]:
        chars = self._chars
        pos = self._start
        end = self._end
        while pos < end:
            unit = ord(chars[pos])
            pos += 1
            if is_high_surrogate(unit) and pos < end:
                low = ord(chars[pos])
                if is_low_surrogate(low):
                    pos += 1
                    yield combine(unit, low)
                    continue
            yield unit

    def code_points(self) -> list[int]:
        """Materialize every code point in the window."""
        return list(self)


__all__ = ["CharInput", "CodePointSource"]
