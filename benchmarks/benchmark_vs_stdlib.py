"""Benchmark Escapade against the standard library escapers.

Compares HTML escaping with html.escape and JSON string escaping with
json.dumps. The standard library functions escape less (no control or
invalid character handling), so this measures overhead, not equivalence.

Run with:
    python benchmarks/benchmark_vs_stdlib.py
"""

import html
import json
import sys
import time
from collections.abc import Callable


def make_corpus() -> list[str]:
    """Build a corpus of short and long strings."""
    docs = []
    for i in range(500):
        docs.append(f'<a href="/item/{i}">Item {i} & friends</a>')
        docs.append(f"caf\u00e9 {i}: it's \"quoted\"\n\ttabbed/slashed")
    docs.append("plain ascii text " * 5000)
    return docs


def benchmark(fn: Callable[[str], object], docs: list[str], iterations: int = 10) -> float:
    """Return seconds per pass over docs."""
    # Warmup
    for doc in docs[:10]:
        fn(doc)

    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            fn(doc)
    elapsed = time.perf_counter() - start

    return elapsed / iterations


def report(title: str, results: list[tuple[str, float]]) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)

    results.sort(key=lambda x: x[1])
    baseline = results[0][1]
    for name, time_val in results:
        ratio = time_val / baseline if baseline > 0 else 0
        print(f"{name:24} {time_val * 1000:8.2f}ms  ({ratio:.2f}x)")


def main() -> None:
    """Run benchmarks and print results."""
    from escapade import Escaper

    docs = make_corpus()
    print(f"Corpus: {len(docs)} strings, {sum(map(len, docs))} characters")
    print(f"Python {sys.version.split()[0]}")

    html_escaper = Escaper("html")
    report(
        "HTML",
        [
            ("escapade", benchmark(html_escaper, docs)),
            ("html.escape", benchmark(html.escape, docs)),
        ],
    )

    json_escaper = Escaper("json")
    report(
        "JSON",
        [
            ("escapade", benchmark(json_escaper, docs)),
            ("json.dumps", benchmark(json.dumps, docs)),
        ],
    )


if __name__ == "__main__":
    main()
