"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large mixed-content string (~100KB)."""
    sections = []
    for i in range(400):
        sections.append(
            f'<p class="note">Section {i}: "quoted", it\'s & more</p>\n'
            f"\tpath/to/file_{i}.txt, value={i}\r\n"
            f"caf\u00e9 na\u00efve \u20ac{i} \u03c0 \U0001f603\n"
        )
    return "".join(sections)


@pytest.fixture
def ascii_document() -> str:
    """Plain ASCII text that needs (almost) no escaping."""
    return "The quick brown fox jumps over the lazy dog. " * 2000


@pytest.fixture
def short_fields() -> list[str]:
    """Many short values, as found in table cells or config entries."""
    return [f"field {i}, \"{i}\"" if i % 3 == 0 else f"field{i}" for i in range(5000)]
