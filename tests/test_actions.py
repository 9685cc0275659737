"""Tests for escape actions and their rendering."""

import pytest

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


class TestRenderAction:
    """render_action() output per action type."""

    def test_pass_through(self) -> None:
        assert render_action(PASS_THROUGH, ord("a")) == "a"

    def test_pass_through_supplementary(self) -> None:
        assert render_action(PASS_THROUGH, 0x1F603) == "\U0001F603"

    def test_drop(self) -> None:
        assert render_action(DROP, 0x00) == ""

    def test_literal(self) -> None:
        assert render_action(LiteralEscape("\\n"), 0x0A) == "\\n"

    def test_named_entity(self) -> None:
        assert render_action(NamedEntity("pound"), 0xA3) == "&pound;"

    def test_numeric_hex(self) -> None:
        assert render_action(NumericEntity(0xA3), 0xA3) == "&#xA3;"

    def test_numeric_decimal(self) -> None:
        assert render_action(NumericEntity(0xA3, 10), 0xA3) == "&#163;"

    def test_numeric_supplementary(self) -> None:
        assert render_action(NumericEntity(0x1F603), 0x1F603) == "&#x1F603;"

    def test_unknown_action(self) -> None:
        with pytest.raises(TypeError):
            render_action(Action(), 0x61)


class TestActionValues:
    """Actions are immutable values."""

    def test_equality(self) -> None:
        assert LiteralEscape("\\t") == LiteralEscape("\\t")
        assert NumericEntity(0x27, 16) != NumericEntity(0x27, 10)
        assert Drop() == DROP
        assert PassThrough() == PASS_THROUGH
        assert DROP != PASS_THROUGH

    def test_frozen(self) -> None:
        entity = NamedEntity("amp")
        with pytest.raises(AttributeError):
            entity.name = "lt"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({NamedEntity("amp"), NamedEntity("amp"), DROP}) == 2

    def test_invalid_base(self) -> None:
        with pytest.raises(ValueError, match="base"):
            NumericEntity(0x41, 8)
