"""Escapade grammar escapers.

One module per target grammar, each exposing ``GRAMMAR``, ``OPTION_TYPE``,
``decide``, ``escape`` and ``escape_to`` (see GrammarEscaper).

Available Escapers:
- csv: RFC 4180 fields, quoted when needed
- html: Element content and attribute values, with optional entity tiers
- java: Java string literals and text blocks
- javascript: JavaScript string literals
- json: JSON string literals
- xml: XML 1.0 content and attribute values
- yaml: YAML scalars, quoted in the least intrusive style that works

Thread Safety:
Escapers keep no mutable state. Output is built in a StringBuilder local
to each escape() call, or written straight to the caller's sink.
Safe for concurrent use from multiple threads.

"""

from collections.abc import Mapping
from types import MappingProxyType

from escapade.escapers import csv, html, java, javascript, json, xml, yaml
from escapade.escapers.protocol import GrammarEscaper, Sink
from escapade.options import Grammar

ESCAPERS: Mapping[Grammar, GrammarEscaper] = MappingProxyType(
    {module.GRAMMAR: module for module in (csv, html, java, javascript, json, xml, yaml)}
)

__all__ = [
    "ESCAPERS",
    "GrammarEscaper",
    "Sink",
    "csv",
    "html",
    "java",
    "javascript",
    "json",
    "xml",
    "yaml",
]
