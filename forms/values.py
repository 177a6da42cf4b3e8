"""Argument values and their gnuplot literal rendering."""
from __future__ import annotations

from dataclasses import dataclass, field

REF_SIGIL = "$"
FLAG_SIGIL = ":"

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


@dataclass(frozen=True)
class Literal:
    """Pre-rendered text, emitted verbatim."""

    text: str


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Bareword:
    name: str


@dataclass(frozen=True)
class FlagWord:
    """Keyword-style marker such as ``:with`` or ``:title``."""

    name: str


@dataclass(frozen=True)
class Sequence:
    items: tuple = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(as_value(item) for item in self.items))


@dataclass(frozen=True)
class Other:
    """Any host value without a dedicated variant; rendered with ``str()``."""

    value: object


@dataclass(frozen=True)
class VariableRef:
    """Names a data block declared earlier in the script, e.g. ``$data``."""

    name: str

    def __post_init__(self) -> None:
        if not self.name.startswith(REF_SIGIL) or len(self.name) == 1:
            raise ValueError(f"Data block reference must start with '{REF_SIGIL}': {self.name!r}")


Value = Literal | Text | Bareword | FlagWord | Sequence | Other | VariableRef

_VALUE_TYPES = (Literal, Text, Bareword, FlagWord, Sequence, Other, VariableRef)


def as_value(obj: object) -> Value:
    """Coerce a plain Python value into a ``Value`` variant."""
    if isinstance(obj, _VALUE_TYPES):
        return obj
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, (list, tuple)):
        return Sequence(tuple(obj))
    return Other(obj)


def quote(s: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(ch, ch) for ch in s) + '"'


def render(value: object) -> str:
    value = as_value(value)
    if isinstance(value, Literal):
        return value.text
    if isinstance(value, Text):
        return quote(value.value)
    if isinstance(value, (Bareword, VariableRef)):
        return value.name
    if isinstance(value, FlagWord):
        return value.name.removeprefix(FLAG_SIGIL)
    if isinstance(value, Sequence):
        # A single item keeps its list brackets; longer sequences are comma-joined bare.
        if len(value.items) == 1:
            return f"[{render(value.items[0])}]"
        return ",".join(render(item) for item in value.items)
    return str(value.value)


def unquoted(value: object) -> str:
    """Underlying text of a value, without string-literal quoting."""
    value = as_value(value)
    if isinstance(value, Text):
        return value.value
    return render(value)
