"""Tests for the HTML escaper.

Every vector is checked through the string, character-list and sink entry
points, which must agree.
"""

import io

import pytest

from escapade.actions import DROP, PASS_THROUGH, NamedEntity, NumericEntity
from escapade.errors import InvalidArgumentError, WindowError
from escapade.escapers import html
from escapade.options import HtmlOption, JsonOption

DEC = HtmlOption.USE_DECIMAL
NON_ASCII = HtmlOption.ESCAPE_NON_ASCII
LATIN1 = HtmlOption.USE_ISO_LATIN_1_ENTITIES
EXTENDED = HtmlOption.USE_HTML4_EXTENDED_ENTITIES

VECTORS = [
    ("", "", ()),
    ("   ", "   ", ()),
    ("a", "a", ()),
    ("~", "~", ()),
    ("&", "&amp;", ()),
    ("<", "&lt;", ()),
    (">", "&gt;", ()),
    ('"', "&quot;", ()),
    ("'", "&#x27;", ()),
    ("'", "&#39;", (DEC,)),
    ("\n", "\n", ()),
    ("\t", "\t", ()),
    ("\r", "\r", ()),
    ("a<b>c\"d'e&f", "a&lt;b&gt;c&quot;d&#x27;e&amp;f", ()),
    ("a<b>c\"d'e&f", "a&lt;b&gt;c&quot;d&#x27;e&amp;f", (LATIN1,)),
    ("a\tb\rc\nd", "a\tb\rc\nd", (NON_ASCII,)),
    ("a\u0000b", "ab", ()),
    ("a\u0000b", "ab", (NON_ASCII,)),
    ("\u001f", "", ()),
    ("\u00a3", "\u00a3", ()),
    ("\u00a3", "&#xA3;", (NON_ASCII,)),
    ("\u00a3", "&#163;", (NON_ASCII, DEC)),
    ("\u00a3", "&pound;", (LATIN1,)),
    ("\u00a3", "&pound;", (NON_ASCII, LATIN1)),
    ("\u03a0", "\u03a0", (LATIN1,)),
    ("\u03a0", "&#x3A0;", (NON_ASCII,)),
    ("\u03a0", "&Pi;", (EXTENDED,)),
    ("\u03a0", "&Pi;", (NON_ASCII, LATIN1, EXTENDED)),
    ("\u20ac", "&euro;", (EXTENDED,)),
    ("\uffff", "", ()),
    ("\uffff", "", (NON_ASCII,)),
    ("\u007f", "&#x7F;", ()),
    ("\u007f", "&#x7F;", (NON_ASCII,)),
    ("\u007f", "&#127;", (DEC,)),
    ("\ud7ff", "\ud7ff", ()),
    ("\ud7ff", "&#xD7FF;", (NON_ASCII,)),
    ("\ue000", "\ue000", ()),
    ("\ue000", "&#xE000;", (NON_ASCII,)),
    ("\ufffd", "&#xFFFD;", (NON_ASCII,)),
    ("\U0001f603", "\U0001f603", ()),
    ("\U0001f603", "&#x1F603;", (NON_ASCII,)),
    ("\U0001f603", "&#128515;", (NON_ASCII, DEC)),
    ("\ud83d\ude03", "\U0001f603", ()),
    ("\ud83d\ude03", "&#x1F603;", (NON_ASCII,)),
    ("a\u0001\u0008\u000b\u000c\u000e\u001fb", "ab", ()),
    ("a~\u007f\u0084\u0085\u0086\u009f\u00a0b", "a~&#x7F;\u0084\u0085\u0086\u009f\u00a0b", ()),
    ("a\ud7ff\ud800 \udfff \ue000b", "a\ud7ff  \ue000b", ()),
    ("a\ufffd\ufffe\uffffb", "a\ufffdb", ()),
    ("a\ufffd\ufffe\uffffb", "a\ufffdb", (DEC,)),
    ("a\ufffd\ufffe\uffffb", "a&#xFFFD;b", (NON_ASCII,)),
    ("a\ufffd\ufffe\uffffb", "a&#65533;b", (NON_ASCII, DEC)),
]


class TestEscape:
    """Reference vectors through every entry point."""

    @pytest.mark.parametrize(("text", "expected", "options"), VECTORS)
    def test_string(self, text: str, expected: str, options: tuple[HtmlOption, ...]) -> None:
        assert html.escape(text, options) == expected

    @pytest.mark.parametrize(("text", "expected", "options"), VECTORS)
    def test_char_list(self, text: str, expected: str, options: tuple[HtmlOption, ...]) -> None:
        assert html.escape(list(text), options) == expected

    @pytest.mark.parametrize(("text", "expected", "options"), VECTORS)
    def test_sink(self, text: str, expected: str, options: tuple[HtmlOption, ...]) -> None:
        out = io.StringIO()
        html.escape_to(text, out, options)
        assert out.getvalue() == expected

    def test_single_option_member(self) -> None:
        assert html.escape("\u00a3", LATIN1) == "&pound;"

    def test_option_order_is_irrelevant(self) -> None:
        assert html.escape("\u00e9", [DEC, NON_ASCII]) == html.escape("\u00e9", {NON_ASCII, DEC})


class TestWindow:
    """offset/length windows."""

    def test_offset_length(self) -> None:
        assert html.escape("Hello & World", offset=6, length=7) == "&amp; World"
        assert html.escape(list("Hello & World"), NON_ASCII, offset=6, length=7) == "&amp; World"

    def test_offset_length_sink(self) -> None:
        out = io.StringIO()
        html.escape_to(list("Hello & World"), out, offset=6, length=7)
        assert out.getvalue() == "&amp; World"

    def test_bad_window(self) -> None:
        with pytest.raises(WindowError):
            html.escape("Hello", offset=3, length=5)


class TestDecide:
    """Per code point decisions."""

    def test_markup(self) -> None:
        assert html.decide(0x26) == NamedEntity("amp")

    def test_apostrophe(self) -> None:
        assert html.decide(0x27) == NumericEntity(0x27, 16)
        assert html.decide(0x27, DEC) == NumericEntity(0x27, 10)

    def test_boundaries(self) -> None:
        assert html.decide(0x1F) == DROP
        assert html.decide(0x20) == PASS_THROUGH
        assert html.decide(0x7E) == PASS_THROUGH
        assert html.decide(0x7F) == NumericEntity(0x7F, 16)
        assert html.decide(0x80) == PASS_THROUGH
        assert html.decide(0x80, NON_ASCII) == NumericEntity(0x80, 16)

    def test_invalid_ranges_drop(self) -> None:
        for cp in (0x00, 0x08, 0x0B, 0x0C, 0x0E, 0xD800, 0xDFFF, 0xFFFE, 0xFFFF):
            assert html.decide(cp) == DROP
            assert html.decide(cp, NON_ASCII) == DROP


class TestErrors:
    """None handling and argument errors."""

    def test_none_text(self) -> None:
        assert html.escape(None) is None
        assert html.escape(None, NON_ASCII, offset=4, length=9) is None

    def test_none_text_writes_nothing(self) -> None:
        out = io.StringIO()
        html.escape_to(None, out)
        assert out.getvalue() == ""

    def test_none_sink(self) -> None:
        with pytest.raises(InvalidArgumentError):
            html.escape_to("a", None)  # type: ignore[arg-type]

    def test_none_sink_checked_before_none_text(self) -> None:
        with pytest.raises(InvalidArgumentError):
            html.escape_to(None, None)  # type: ignore[arg-type]

    def test_foreign_option(self) -> None:
        with pytest.raises(InvalidArgumentError):
            html.escape("a", JsonOption.ESCAPE_NON_ASCII)

    def test_sink_not_closed(self) -> None:
        out = io.StringIO()
        html.escape_to("<", out)
        assert not out.closed
        out.write("!")
        assert out.getvalue() == "&lt;!"
