"""Typed escape decisions for Escapade.

Every escaper exposes ``decide(cp, options)``, a total function from a code
point to exactly one of the actions below. The driver loop renders the
action with ``render_action`` and writes the result to the sink.

Action Hierarchy:
Action (base)
├── Drop            (write nothing)
├── PassThrough     (write the code point itself)
├── LiteralEscape   (write a fixed escape sequence, e.g. \\n)
├── NumericEntity   (write &#xHH; or &#DD;)
└── NamedEntity     (write &name;)

Thread Safety:
All actions are frozen (immutable) and safe to share across threads. The
stateless ones are module-level singletons.

"""

from dataclasses import dataclass

from escapade.utils.hexadecimal import decimal, hex_variable


@dataclass(frozen=True, slots=True)
class Action:
    """Base class for all escape decisions."""


@dataclass(frozen=True, slots=True)
class Drop(Action):
    """The code point cannot be represented and produces no output."""


@dataclass(frozen=True, slots=True)
class PassThrough(Action):
    """The code point is written unchanged."""


@dataclass(frozen=True, slots=True)
class LiteralEscape(Action):
    """The code point is replaced by a fixed escape sequence."""

    text: str


@dataclass(frozen=True, slots=True)
class NumericEntity(Action):
    """The code point is written as a numeric character reference.

    Attributes:
        value: Code point to reference
        base: 16 for ``&#xHH;`` or 10 for ``&#DD;``

    """

    value: int
    base: int = 16

    def __post_init__(self) -> None:
        if self.base not in (10, 16):
            raise ValueError(f"numeric entity base must be 10 or 16, not {self.base}")

    @property
    def reference(self) -> str:
        if self.base == 16:
            return f"&#x{hex_variable(self.value)};"
        return f"&#{decimal(self.value)};"


@dataclass(frozen=True, slots=True)
class NamedEntity(Action):
    """The code point is written as a named entity, e.g. ``&pound;``.

    Attributes:
        name: Entity name without the leading ``&`` and trailing ``;``

    """

    name: str

    @property
    def reference(self) -> str:
        return f"&{self.name};"


DROP = Drop()
PASS_THROUGH = PassThrough()


def render_action(action: Action, cp: int) -> str:
    """Render the output fragment for cp under action.

    Args:
        action: Decision returned by an escaper's ``decide``
        cp: The code point the decision was made for

    Returns:
        Text to write; empty for ``Drop``.
    """
    match action:
        case PassThrough():
            return chr(cp)
        case LiteralEscape(text=text):
            return text
        case NamedEntity() | NumericEntity():
            return action.reference
        case Drop():
            return ""
        case _:
            raise TypeError(f"Unknown escape action: {action!r}")


__all__ = [
    "DROP",
    "PASS_THROUGH",
    "Action",
    "Drop",
    "LiteralEscape",
    "NamedEntity",
    "NumericEntity",
    "PassThrough",
    "render_action",
]
