"""Grammars and per-grammar escaping options.

Each grammar has its own option enum. An option set is a ``frozenset`` of
members of that enum; order and duplicates never matter, and the empty set
always selects the default (minimal) escaping.

Usage:
    from escapade.options import HtmlOption, coerce_options

    opts = coerce_options([HtmlOption.USE_DECIMAL], HtmlOption)
    opts = coerce_options(HtmlOption.USE_DECIMAL, HtmlOption)  # single member
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum, auto
from types import MappingProxyType
from typing import TypeVar, Union

from escapade.errors import InvalidArgumentError, UnknownOptionError


class Grammar(Enum):
    """Target output grammars."""

    CSV = "csv"
    HTML = "html"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    JSON = "json"
    XML = "xml"
    YAML = "yaml"


class CsvOption(Enum):
    """CSV escaping has no options."""


class HtmlOption(Enum):
    """HTML escaping options.

    - USE_DECIMAL: Numeric references in decimal (&#163;) instead of hex (&#xA3;)
    - ESCAPE_NON_ASCII: Escape every valid code point above 0x7F
    - USE_ISO_LATIN_1_ENTITIES: Named entities for 0xA0-0xFF
    - USE_HTML4_EXTENDED_ENTITIES: Named entities for HTML 4 symbols above 0xFF

    """

    USE_DECIMAL = auto()
    ESCAPE_NON_ASCII = auto()
    USE_ISO_LATIN_1_ENTITIES = auto()
    USE_HTML4_EXTENDED_ENTITIES = auto()


class XmlOption(Enum):
    """XML escaping options (see HtmlOption for meanings)."""

    USE_DECIMAL = auto()
    ESCAPE_NON_ASCII = auto()


class JsonOption(Enum):
    ESCAPE_NON_ASCII = auto()


class JavaOption(Enum):
    """Java source escaping options.

    - ESCAPE_SPACE: Write space as \\s (only valid inside a text block)
    - ESCAPE_NON_ASCII: Write every code point above 0x7F as \\uHHHH

    """

    ESCAPE_SPACE = auto()
    ESCAPE_NON_ASCII = auto()


class JavaScriptOption(Enum):
    ESCAPE_NON_ASCII = auto()


class YamlOption(Enum):
    ESCAPE_NON_ASCII = auto()


OPTION_TYPES: Mapping[Grammar, type[Enum]] = MappingProxyType(
    {
        Grammar.CSV: CsvOption,
        Grammar.HTML: HtmlOption,
        Grammar.JAVA: JavaOption,
        Grammar.JAVASCRIPT: JavaScriptOption,
        Grammar.JSON: JsonOption,
        Grammar.XML: XmlOption,
        Grammar.YAML: YamlOption,
    }
)

E = TypeVar("E", bound=Enum)

# What callers may pass wherever an option set is expected
OptionsArg = Union[Enum, Iterable[Enum], None]


def coerce_options(options: OptionsArg, option_type: type[E]) -> frozenset[E]:
    """Normalize an options argument into a frozenset of option_type members.

    Args:
        options: None, a single member, or an iterable of members
        option_type: The grammar's option enum

    Returns:
        Frozen option set (empty for None).

    Raises:
        InvalidArgumentError: If any member belongs to another enum.
    """
    if options is None:
        return frozenset()
    if isinstance(options, Enum):
        options = (options,)
    result = frozenset(options)
    for option in result:
        if not isinstance(option, option_type):
            raise InvalidArgumentError(
                f"{option!r} is not a {option_type.__name__}"
            )
    return result  # type: ignore[return-value]


def to_grammar(value: Grammar | str) -> Grammar:
    """Resolve a Grammar from a member or a case-insensitive name.

    Raises:
        InvalidArgumentError: If value names no grammar.
    """
    if isinstance(value, Grammar):
        return value
    try:
        return Grammar(value.strip().lower())
    except (AttributeError, ValueError):
        raise InvalidArgumentError(f"Unknown grammar: {value!r}") from None


def _normalize_name(name: str) -> str:
    return name.strip().upper().replace("-", "_")


def options_from_names(grammar: Grammar | str, names: Iterable[str | Enum]) -> frozenset[Enum]:
    """Build an option set from option names.

    Names are matched case-insensitively and hyphens may stand in for
    underscores, so "use-decimal", "use_decimal" and "USE_DECIMAL" are the
    same option. Enum members are accepted as-is.

    Args:
        grammar: Grammar (or its name) whose options are named
        names: Option names or members

    Returns:
        Frozen option set.

    Raises:
        UnknownOptionError: If a name is not an option of the grammar.
        InvalidArgumentError: If a member belongs to another grammar.

    Example:
        >>> sorted(o.name for o in options_from_names("html", ["use-decimal"]))
        ['USE_DECIMAL']
    """
    grammar = to_grammar(grammar)
    option_type = OPTION_TYPES[grammar]
    if isinstance(names, str):
        names = (names,)
    members: list[Enum] = []
    for name in names:
        if isinstance(name, Enum):
            members.append(name)
            continue
        try:
            members.append(option_type[_normalize_name(name)])
        except KeyError:
            raise UnknownOptionError(grammar.value, name) from None
    return coerce_options(members, option_type)


__all__ = [
    "OPTION_TYPES",
    "CsvOption",
    "Grammar",
    "HtmlOption",
    "JavaOption",
    "JavaScriptOption",
    "JsonOption",
    "OptionsArg",
    "XmlOption",
    "YamlOption",
    "coerce_options",
    "options_from_names",
    "to_grammar",
]
