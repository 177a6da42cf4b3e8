"""Statement forms and the per-form fragment renderers.

Each form renders to exactly one text fragment. ``render_form`` looks the
renderer up by form type, so anything that is not one of the forms below is
rejected with ``UnknownForm`` before a script is ever assembled.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from errors import UnknownForm
from forms.values import Value, VariableRef, as_value, render, unquoted

HEREDOC_END = "EOD"
PLOT_SEPARATOR = ",\n     "


def _items(items) -> tuple:
    """A list or tuple holds several arguments; anything else is a single one."""
    if isinstance(items, (list, tuple)):
        return tuple(items)
    return (items,)


def _values(items) -> tuple[Value, ...]:
    return tuple(as_value(item) for item in _items(items))


def _expr(obj: object) -> str:
    """Expressions given as plain strings are already gnuplot syntax."""
    return obj if isinstance(obj, str) else render(obj)


@dataclass(frozen=True)
class Set:
    name: str
    values: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _values(self.values))


@dataclass(frozen=True)
class Unset:
    name: str


@dataclass(frozen=True)
class Curve:
    source: object
    options: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", as_value(self.source))
        object.__setattr__(self, "options", _values(self.options))


@dataclass(frozen=True)
class Plot:
    curves: tuple = ()

    def __post_init__(self) -> None:
        curves = tuple(c if isinstance(c, Curve) else Curve(c) for c in _items(self.curves))
        object.__setattr__(self, "curves", curves)


@dataclass(frozen=True)
class Data:
    name: str
    lines: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(str(line) for line in _items(self.lines)))


@dataclass(frozen=True)
class Table:
    name: str
    rows: tuple = ()

    def __post_init__(self) -> None:
        if not all(isinstance(row, (list, tuple)) for row in self.rows):
            raise TypeError(f"Table rows must be lists or tuples of cells: {self.rows!r}")
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))

    def as_data(self) -> Data:
        line = "\n".join(" ".join(render(cell) for cell in row) for row in self.rows)
        return Data(self.name, (line,))


@dataclass(frozen=True)
class FunctionDef:
    name: str
    params: tuple = ()
    body: object = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(str(p) for p in _items(self.params)))


@dataclass(frozen=True)
class ConstDef:
    name: str
    body: object = ""


@dataclass(frozen=True)
class Comment:
    parts: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", _items(self.parts))


@dataclass(frozen=True)
class Raw:
    text: str


@dataclass(frozen=True)
class Reset:
    pass


Form = Set | Unset | Plot | Curve | Table | Data | FunctionDef | ConstDef | Comment | Raw | Reset


# ── Fragment renderers ────────────────────────────────────────────────────────

def _render_set(form: Set) -> str:
    return " ".join(["set " + form.name, *(render(v) for v in form.values)])


def _render_unset(form: Unset) -> str:
    return "unset " + form.name


def _render_curve(form: Curve) -> str:
    if isinstance(form.source, VariableRef):
        source = form.source.name
    else:
        source = render(form.source)
    if not form.options:
        return source
    return source + " " + " ".join(render(o) for o in form.options)


def _render_plot(form: Plot) -> str:
    return "plot " + PLOT_SEPARATOR.join(_render_curve(c) for c in form.curves)


def _render_data(form: Data) -> str:
    return f"{form.name} << {HEREDOC_END}\n" + "\n".join(form.lines) + f"\n{HEREDOC_END}"


def _render_table(form: Table) -> str:
    return _render_data(form.as_data())


def _render_function(form: FunctionDef) -> str:
    return f"{form.name}({','.join(form.params)}) = {_expr(form.body)}"


def _render_const(form: ConstDef) -> str:
    return f"{form.name} = {_expr(form.body)}"


def _render_comment(form: Comment) -> str:
    return "# " + "".join(str(part) for part in form.parts)


_RENDERERS: dict[type, Callable[..., str]] = {
    Set: _render_set,
    Unset: _render_unset,
    Plot: _render_plot,
    Curve: _render_curve,
    Table: _render_table,
    Data: _render_data,
    FunctionDef: _render_function,
    ConstDef: _render_const,
    Comment: _render_comment,
    Raw: lambda form: form.text,
    Reset: lambda form: "reset",
}


def render_form(form: object) -> str:
    renderer = _RENDERERS.get(type(form))
    if renderer is None:
        raise UnknownForm(type(form).__name__)
    return renderer(form)


FORM_TYPES = tuple(_RENDERERS)


def check_form(form: object) -> None:
    if type(form) not in FORM_TYPES:
        raise UnknownForm(type(form).__name__)


def declared_output(form: object) -> tuple[bool, str | None]:
    """Report whether ``form`` is a ``set output`` and the path it names.

    A bare ``set output`` (no value) sends output back to the terminal, so it
    clears any path declared before it.
    """
    if not isinstance(form, Set) or form.name != "output":
        return False, None
    if not form.values:
        return True, None
    return True, unquoted(form.values[0])
