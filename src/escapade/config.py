"""ContextVar-based escaping configuration for Escapade.

Holds the default option set for every grammar. Escaping calls made with
``options=None`` read their defaults from the active config; explicit
options always win.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from escapade import escape
    from escapade.config import EscapeConfig, escape_config_context
    from escapade.options import HtmlOption

    config = EscapeConfig(html=frozenset({HtmlOption.USE_DECIMAL}))
    with escape_config_context(config):
        escape("'", "html")  # '&#39;'

    # Or from a settings file / framework dict
    config = EscapeConfig.from_dict({"html": ["use_decimal", "escape_non_ascii"]})

"""

from collections.abc import Iterable, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Iterator

from escapade.options import (
    OPTION_TYPES,
    CsvOption,
    Grammar,
    HtmlOption,
    JavaOption,
    JavaScriptOption,
    JsonOption,
    XmlOption,
    YamlOption,
    coerce_options,
    options_from_names,
)
from escapade.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class EscapeConfig:
    """Immutable default option sets, one per grammar.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        csv: Defaults for CSV (always empty; CSV has no options)
        html: Defaults for HTML
        java: Defaults for Java source
        javascript: Defaults for JavaScript source
        json: Defaults for JSON
        xml: Defaults for XML
        yaml: Defaults for YAML

    """

    csv: frozenset[CsvOption] = frozenset()
    html: frozenset[HtmlOption] = frozenset()
    java: frozenset[JavaOption] = frozenset()
    javascript: frozenset[JavaScriptOption] = frozenset()
    json: frozenset[JsonOption] = frozenset()
    xml: frozenset[XmlOption] = frozenset()
    yaml: frozenset[YamlOption] = frozenset()

    def __post_init__(self) -> None:
        # Normalize lists/sets/single members and reject foreign members
        for grammar, option_type in OPTION_TYPES.items():
            value = getattr(self, grammar.value)
            object.__setattr__(self, grammar.value, coerce_options(value, option_type))

    def options_for(self, grammar: Grammar) -> frozenset[Enum]:
        """Return the default option set for grammar."""
        return getattr(self, grammar.value)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Iterable[str | Enum]]) -> "EscapeConfig":
        """Create EscapeConfig from dictionary.

        Useful for framework integration where config may come from external
        sources (settings modules, TOML/YAML files, etc.).

        Keys are grammar names; values are iterables of option names (or
        option members). Unknown keys are ignored.

        Args:
            config_dict: Dictionary keyed by grammar name.

        Returns:
            New EscapeConfig instance with values from dict.

        Raises:
            UnknownOptionError: If an option name is not valid for its grammar.

        Example:
            >>> config = EscapeConfig.from_dict({
            ...     "html": ["use_decimal"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(o.name for o in config.html)
            ['USE_DECIMAL']

        """
        valid_fields = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, names in config_dict.items():
            if key not in valid_fields:
                logger.debug("Ignoring unknown escape config key %r", key)
                continue
            values[key] = options_from_names(key, names)
        return cls(**values)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: EscapeConfig = EscapeConfig()

# Thread-local configuration via ContextVar
_escape_config: ContextVar[EscapeConfig] = ContextVar(
    "escape_config",
    default=_DEFAULT_CONFIG,
)


def get_escape_config() -> EscapeConfig:
    """Get current escape configuration (thread-local).

    Returns:
        The active EscapeConfig for this thread/context.

    """
    return _escape_config.get()


def set_escape_config(config: EscapeConfig) -> None:
    """Set escape configuration for current context.

    Args:
        config: EscapeConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _escape_config.set(config)


def reset_escape_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _escape_config.set(_DEFAULT_CONFIG)


@contextmanager
def escape_config_context(config: EscapeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: EscapeConfig to use within the context.

    Yields:
        None

    Example:
        >>> from escapade.options import JsonOption
        >>> with escape_config_context(EscapeConfig(json=[JsonOption.ESCAPE_NON_ASCII])):
        ...     pass  # json escaping defaults to ESCAPE_NON_ASCII here
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _escape_config.get()
    _escape_config.set(config)
    try:
        yield
    finally:
        _escape_config.set(previous)


def resolve_options(options: Any, grammar: Grammar) -> frozenset[Enum]:
    """Resolve an options argument for grammar.

    None selects the active config's defaults; anything else is coerced
    into the grammar's option set.
    """
    if options is None:
        return _escape_config.get().options_for(grammar)
    return coerce_options(options, OPTION_TYPES[grammar])


__all__ = [
    "EscapeConfig",
    "escape_config_context",
    "get_escape_config",
    "reset_escape_config",
    "resolve_options",
    "set_escape_config",
]
