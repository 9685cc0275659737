"""Property-based tests for Escapade using Hypothesis.

These tests verify invariants that should hold for any input:
1. Every grammar has a decision for every code point
2. Markup output never contains a raw markup-significant character
3. Characters that pass through are unchanged when escaped alone
4. CSV and YAML wrap their output exactly as their quoting rules say

Property-based testing finds edge cases that example-based tests miss.
"""

import json as stdlib_json
import re
from enum import Enum

from hypothesis import given, settings
from hypothesis import strategies as st

from escapade import ESCAPERS, Grammar, escape, options_from_names
from escapade.actions import PASS_THROUGH, Action
from escapade.escapers import csv, yaml
from escapade.options import OPTION_TYPES

code_points = st.integers(min_value=0, max_value=0x10FFFF)
texts = st.text(max_size=50)
grammars = st.sampled_from(list(Grammar))

# Grammars whose per-character decision is the whole story
CHARACTER_GRAMMARS = [Grammar.HTML, Grammar.XML, Grammar.JSON, Grammar.JAVA, Grammar.JAVASCRIPT]

ENTITY = re.compile(r"&(?:#x[0-9A-F]+|#[0-9]+|[A-Za-z][A-Za-z0-9]*);")


@st.composite
def grammar_and_options(draw: st.DrawFn) -> tuple[Grammar, frozenset[Enum]]:
    grammar = draw(grammars)
    members = list(OPTION_TYPES[grammar])
    if not members:
        return grammar, frozenset()
    return grammar, frozenset(draw(st.lists(st.sampled_from(members), unique=True)))


class TestDecisionProperties:
    """Per code point decisions."""

    @given(cp=code_points, pair=grammar_and_options())
    @settings(max_examples=500)
    def test_decide_is_total(self, cp: int, pair: tuple[Grammar, frozenset[Enum]]) -> None:
        """Every code point gets an action under every option set."""
        grammar, options = pair
        assert isinstance(ESCAPERS[grammar].decide(cp, options), Action)

    @given(cp=code_points, pair=grammar_and_options())
    @settings(max_examples=300)
    def test_decide_is_deterministic(self, cp: int, pair: tuple[Grammar, frozenset[Enum]]) -> None:
        grammar, options = pair
        escaper = ESCAPERS[grammar]
        assert escaper.decide(cp, options) == escaper.decide(cp, options)

    @given(cp=code_points, grammar=st.sampled_from(CHARACTER_GRAMMARS))
    @settings(max_examples=500)
    def test_pass_through_is_unchanged(self, cp: int, grammar: Grammar) -> None:
        """A character the grammar passes through escapes to itself."""
        if ESCAPERS[grammar].decide(cp, ()) == PASS_THROUGH:
            assert escape(chr(cp), grammar, ()) == chr(cp)


class TestOutputProperties:
    """Whole-string escaping."""

    @given(text=texts, pair=grammar_and_options())
    @settings(max_examples=200)
    def test_entry_points_agree(self, text: str, pair: tuple[Grammar, frozenset[Enum]]) -> None:
        """Strings and character lists escape identically."""
        grammar, options = pair
        assert escape(text, grammar, options) == escape(list(text), grammar, options)

    @given(text=texts, pair=grammar_and_options())
    @settings(max_examples=200)
    def test_markup_has_no_raw_specials(self, text: str, pair: tuple[Grammar, frozenset[Enum]]) -> None:
        grammar, options = pair
        if grammar not in (Grammar.HTML, Grammar.XML):
            return
        stripped = ENTITY.sub("", escape(text, grammar, options))
        assert not set(stripped) & set("<>&\"")

    @given(text=texts, escape_non_ascii=st.booleans())
    @settings(max_examples=200)
    def test_json_round_trips(self, text: str, escape_non_ascii: bool) -> None:
        """Escaped JSON parses back to the original text."""
        options = ["escape_non_ascii"] if escape_non_ascii else []
        escaped = escape(text, "json", options_from_names("json", options))
        assert stdlib_json.loads(f'"{escaped}"') == text
        if escape_non_ascii:
            assert escaped.isascii()


class TestQuotingProperties:
    """CSV and YAML delimiters."""

    @given(text=texts)
    @settings(max_examples=200)
    def test_csv_structure(self, text: str) -> None:
        escaped = csv.escape(text)
        if csv.requires_quotes(text):
            assert escaped == '"' + text.replace('"', '""') + '"'
        else:
            assert escaped == text

    @given(text=texts, escape_non_ascii=st.booleans())
    @settings(max_examples=200)
    def test_yaml_structure(self, text: str, escape_non_ascii: bool) -> None:
        options = [yaml.OPTION_TYPE.ESCAPE_NON_ASCII] if escape_non_ascii else []
        escaped = yaml.escape(text, options)
        quoting = yaml.requires_quotes(text, escape_non_ascii)
        if quoting is yaml.Quoting.NONE:
            assert escaped == text
        elif quoting is yaml.Quoting.SINGLE:
            assert escaped == f"'{text}'"
        else:
            assert len(escaped) >= 2
            assert escaped[0] == escaped[-1] == '"'
            body = escaped[1:-1]
            assert not any(ord(c) < 0x20 or ord(c) == 0x7F for c in body)
