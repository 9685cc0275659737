"""StringBuilder for O(n) string accumulation.

Every string-returning escape call writes its fragments into a
StringBuilder and joins once at the end: O(n) total vs O(n²) for repeated
string concatenation. StringBuilder also satisfies the sink protocol
(``write(str)``), so engines never need to know whether they are writing to
a caller's stream or building a string.

Thread Safety:
StringBuilder instances are local to each escape() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator and in-memory sink.

    Appends to a list, joins once at the end.
    O(n) total vs O(n²) for repeated string concatenation.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.write("foo,bar")
            7
            >>> sb.append('"').build()
            'foo,bar"'

    Thread Safety:
        Instance is local to each escape() call.
        No shared mutable state.

    """

    __slots__ = ("_length", "_parts")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._length = 0

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def write(self, s: str) -> int:
        """Append a string, mirroring ``io.TextIOBase.write``.

        Returns:
            Number of characters written
        """
        self.append(s)
        return len(s)

    def extend(self, strings: list[str]) -> StringBuilder:
        """Append multiple strings at once.

        Args:
            strings: List of strings to append

        Returns:
            self for method chaining
        """
        for s in strings:
            self.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        """Clear all accumulated parts.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        self._length = 0
        return self

    def __len__(self) -> int:
        """Return total number of characters accumulated."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if any non-empty string has been appended."""
        return bool(self._parts)
