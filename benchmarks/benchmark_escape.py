"""Benchmarks for every grammar.

Run with:
    pytest benchmarks/benchmark_escape.py -v --benchmark-only
"""

import io

import pytest

from escapade import Escaper, Grammar, escape, escape_to

GRAMMARS = [g.value for g in Grammar]


class TestEscapeBenchmarks:
    @pytest.mark.parametrize("grammar", GRAMMARS)
    @pytest.mark.benchmark(group="escape-large")
    def test_benchmark_large_document(self, benchmark, large_document, grammar):
        """Escape a ~100KB mixed document to a string."""
        result = benchmark(escape, large_document, grammar)
        assert result

    @pytest.mark.parametrize("grammar", GRAMMARS)
    @pytest.mark.benchmark(group="escape-ascii")
    def test_benchmark_ascii_document(self, benchmark, ascii_document, grammar):
        """Mostly pass-through input."""
        result = benchmark(escape, ascii_document, grammar)
        assert result

    @pytest.mark.benchmark(group="escape-sink")
    def test_benchmark_escape_to_sink(self, benchmark, large_document):
        def write_all():
            out = io.StringIO()
            escape_to(large_document, out, "html")
            return out.getvalue()

        assert benchmark(write_all)

    @pytest.mark.parametrize("grammar", ["csv", "json", "yaml"])
    @pytest.mark.benchmark(group="escape-many")
    def test_benchmark_escape_many(self, benchmark, short_fields, grammar):
        """Reusable Escaper over many short values."""
        esc = Escaper(grammar)
        results = benchmark(esc.escape_many, short_fields)
        assert len(results) == len(short_fields)
