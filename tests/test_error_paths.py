"""Error-path and malformed input tests.

Tests that exercise error handling, edge cases, and graceful degradation
for unusable arguments and misbehaving sinks. These complement the
happy-path tests in test_api.py and the per-grammar tests.
"""

import io
import logging

import pytest

from escapade import Escaper, escape, escape_to
from escapade.errors import EscapadeError, InvalidArgumentError, UnknownOptionError, WindowError
from escapade.escapers import ESCAPERS

# =========================================================================
# Error construction and formatting
# =========================================================================


class TestWindowErrorFormatting:
    """Verify WindowError produces well-formatted messages."""

    def test_message(self) -> None:
        err = WindowError(3, 5, 4)
        assert str(err) == "window [offset=3, length=5] out of bounds for size 4"

    def test_attributes(self) -> None:
        err = WindowError(1, 2, 0)
        assert (err.offset, err.length, err.size) == (1, 2, 0)

    def test_hierarchy(self) -> None:
        err = WindowError(0, 1, 0)
        assert isinstance(err, EscapadeError)
        assert isinstance(err, IndexError)


class TestUnknownOptionError:
    """Verify UnknownOptionError formatting and hierarchy."""

    def test_basic_format(self) -> None:
        err = UnknownOptionError("yaml", "use_decimal")
        assert str(err) == "Unknown yaml option 'use_decimal'"

    def test_is_invalid_argument(self) -> None:
        err = UnknownOptionError("json", "x")
        assert isinstance(err, InvalidArgumentError)
        assert isinstance(err, ValueError)
        assert isinstance(err, EscapadeError)


# =========================================================================
# Bad windows
# =========================================================================


@pytest.mark.parametrize("grammar", sorted(g.value for g in ESCAPERS))
class TestBadWindows:
    """Every grammar rejects windows that do not fit, before writing."""

    @pytest.mark.parametrize(
        ("offset", "length"),
        [(-1, 1), (0, -1), (0, 6), (5, 1), (6, None), (3, 3)],
    )
    def test_escape(self, grammar: str, offset: int, length: int | None) -> None:
        with pytest.raises(WindowError):
            escape("Hello", grammar, offset=offset, length=length)

    def test_escape_to_writes_nothing(self, grammar: str) -> None:
        out = io.StringIO()
        with pytest.raises(WindowError):
            escape_to("<a,b>", out, grammar, offset=2, length=9)
        assert out.getvalue() == ""

    def test_empty_window(self, grammar: str) -> None:
        assert escape("Hello", grammar, offset=5, length=0) == ("''" if grammar == "yaml" else "")

    def test_none_text_ignores_window(self, grammar: str) -> None:
        assert escape(None, grammar, offset=10, length=10) is None


# =========================================================================
# Sinks
# =========================================================================


class FailingSink:
    """Sink that accepts a fixed number of writes, then raises."""

    def __init__(self, allowed: int) -> None:
        self.allowed = allowed
        self.written: list[str] = []

    def write(self, s: str) -> int:
        if len(self.written) >= self.allowed:
            raise OSError("disk full")
        self.written.append(s)
        return len(s)


class TestSinkFailures:
    """Exceptions from the sink propagate unchanged."""

    def test_error_propagates_unwrapped(self) -> None:
        sink = FailingSink(allowed=0)
        with pytest.raises(OSError, match="disk full"):
            escape_to("a", sink, "json")

    def test_partial_output_kept(self) -> None:
        sink = FailingSink(allowed=2)
        with pytest.raises(OSError):
            escape_to("ab<c", sink, "html")
        assert "".join(sink.written) == "ab"

    def test_yaml_fails_on_opening_quote(self) -> None:
        sink = FailingSink(allowed=0)
        with pytest.raises(OSError):
            escape_to('a"b', sink, "yaml")
        assert sink.written == []

    def test_escaper_write(self) -> None:
        sink = FailingSink(allowed=1)
        with pytest.raises(OSError):
            Escaper("xml").write("a&b", sink)
        assert sink.written == ["a"]


class TestNoneArguments:
    """Absent text is not an error; absent sinks are."""

    @pytest.mark.parametrize("grammar", sorted(g.value for g in ESCAPERS))
    def test_none_text(self, grammar: str) -> None:
        out = io.StringIO()
        assert escape(None, grammar) is None
        escape_to(None, out, grammar)
        assert out.getvalue() == ""

    @pytest.mark.parametrize("grammar", sorted(g.value for g in ESCAPERS))
    def test_none_sink(self, grammar: str) -> None:
        with pytest.raises(InvalidArgumentError, match="sink"):
            escape_to("a", None, grammar)  # type: ignore[arg-type]

    def test_none_sink_on_escaper(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Escaper("csv").write(None, None)  # type: ignore[arg-type]


# =========================================================================
# Dropped code points
# =========================================================================


class TestDroppedCodePoints:
    """Dropping is silent for callers but visible in debug logs."""

    def test_drop_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="escapade.escapers.base"):
            assert escape("a\ufffeb", "html") == "ab"

        messages = [record.getMessage() for record in caplog.records]
        assert "Dropped U+FFFE: not representable in html" in messages

    def test_no_log_without_drop(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="escapade.escapers.base"):
            escape("plain <text>", "xml")

        assert not caplog.records

    def test_no_warning_level_records(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="escapade"):
            escape("\u0000\u0001", "xml")

        assert not caplog.records
