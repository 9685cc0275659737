"""Exception classes for Escapade.

Provides standardized exceptions for error handling throughout Escapade.
Absent input (``None``) is never an error; it propagates as ``None`` output
or as a no-op write. Exceptions raised by a caller's sink are not wrapped.
"""

from __future__ import annotations


class EscapadeError(Exception):
    """Base exception for all Escapade errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidArgumentError(EscapadeError, ValueError):
    """An argument is unusable, such as a ``None`` sink.

    Raised before any output is written.
    """

    pass


class UnknownOptionError(InvalidArgumentError):
    """An option name does not belong to the grammar's option set.

    Raised when options are built from names, e.g. by
    ``EscapeConfig.from_dict``.
    """

    def __init__(self, grammar: str, name: str) -> None:
        """Initialize unknown option error.

        Args:
            grammar: Grammar the option was requested for (e.g., "html")
            name: The option name that could not be resolved
        """
        self.grammar = grammar
        self.name = name
        super().__init__(f"Unknown {grammar} option '{name}'")


class WindowError(EscapadeError, IndexError):
    """An offset/length window does not fit inside the input.

    Raised before any output is written.
    """

    def __init__(self, offset: int, length: int, size: int) -> None:
        """Initialize window error.

        Args:
            offset: Requested start of the window
            length: Requested number of units in the window
            size: Number of units actually available in the input
        """
        self.offset = offset
        self.length = length
        self.size = size
        super().__init__(
            f"window [offset={offset}, length={length}] out of bounds for size {size}"
        )


__all__ = [
    "EscapadeError",
    "InvalidArgumentError",
    "UnknownOptionError",
    "WindowError",
]
