"""Turn form expressions into form objects.

A form expression is a list or tuple whose head names the statement::

    ["set", "terminal", {"bare": "pngcairo"}]
    ["table", "$data", [[0, 0], [1, 1]]]
    ["plot", ["curve", {"ref": "$data"}, {"flag": "with"}, {"bare": "lines"}]]

Arguments may be value objects, plain Python values, or the JSON tagged
dicts understood by ``decode_value``. Form objects pass through unchanged.
"""
from __future__ import annotations

from collections.abc import Callable

from errors import UnknownForm
from forms import statements as st
from forms.values import Bareword, FlagWord, Literal, Sequence, Value, VariableRef, as_value

_TAGS: dict[str, Callable[[str], Value]] = {
    "raw": Literal,
    "bare": Bareword,
    "flag": FlagWord,
    "ref": VariableRef,
}


def decode_value(obj: object) -> Value:
    """Decode a JSON-shaped argument into a value.

    ``{"raw": s}``, ``{"bare": s}``, ``{"flag": s}`` and ``{"ref": s}`` select
    the tagged variants; arrays become sequences; everything else goes
    through ``as_value``.
    """
    if isinstance(obj, dict) and len(obj) == 1:
        (tag, payload), = obj.items()
        if tag in _TAGS and isinstance(payload, str):
            return _TAGS[tag](payload)
    if isinstance(obj, (list, tuple)):
        return Sequence(tuple(decode_value(item) for item in obj))
    return as_value(obj)


def _name(head: str, obj: object) -> str:
    if isinstance(obj, VariableRef):
        return obj.name
    if isinstance(obj, dict):
        obj = decode_value(obj)
        if isinstance(obj, (VariableRef, Bareword)):
            return obj.name
    if not isinstance(obj, str):
        raise UnknownForm(head, f"expected a name, got {obj!r}")
    return obj


def _parse_curve(head: str, args: list) -> st.Curve:
    if not args:
        raise UnknownForm(head, "a curve needs a source")
    source = decode_value(args[0])
    return st.Curve(source, tuple(decode_value(a) for a in args[1:]))


def _plot_item(obj: object) -> st.Curve:
    if isinstance(obj, st.Curve):
        return obj
    if isinstance(obj, (list, tuple)) and obj and obj[0] == "curve":
        return _parse_curve("curve", list(obj[1:]))
    return st.Curve(decode_value(obj))


def _parse_table(head: str, args: list) -> st.Table:
    name, rows = args
    if not isinstance(rows, (list, tuple)) or not all(isinstance(r, (list, tuple)) for r in rows):
        raise UnknownForm(head, "rows must be a list of lists")
    return st.Table(_name(head, name), tuple(tuple(decode_value(c) for c in r) for r in rows))


def _parse_data(head: str, args: list) -> st.Data:
    name, lines = args[0], args[1:]
    if len(lines) == 1 and isinstance(lines[0], (list, tuple)):
        lines = lines[0]
    if not all(isinstance(line, str) for line in lines):
        raise UnknownForm(head, "lines must be strings")
    return st.Data(_name(head, name), tuple(lines))


def _parse_function(head: str, args: list) -> st.FunctionDef:
    name, params, body = args
    if isinstance(params, str):
        params = [params]
    if not isinstance(params, (list, tuple)) or not all(isinstance(p, str) for p in params):
        raise UnknownForm(head, "params must be a list of names")
    return st.FunctionDef(_name(head, name), tuple(params), body if isinstance(body, str) else decode_value(body))


def _parse_const(head: str, args: list) -> st.ConstDef:
    name, body = args
    return st.ConstDef(_name(head, name), body if isinstance(body, str) else decode_value(body))


# head -> (builder, min args, max args or None for variadic)
_FORMS: dict[str, tuple[Callable[[str, list], object], int, int | None]] = {
    "set": (lambda h, a: st.Set(_name(h, a[0]), tuple(decode_value(v) for v in a[1:])), 1, None),
    "unset": (lambda h, a: st.Unset(_name(h, a[0])), 1, 1),
    "plot": (lambda h, a: st.Plot(tuple(_plot_item(c) for c in a)), 1, None),
    "curve": (_parse_curve, 1, None),
    "table": (_parse_table, 2, 2),
    "data": (_parse_data, 1, None),
    "fn": (_parse_function, 3, 3),
    "const": (_parse_const, 2, 2),
    "comment": (lambda h, a: st.Comment(tuple(a)), 0, None),
    "raw": (lambda h, a: st.Raw(str(a[0])), 1, 1),
    "reset": (lambda h, a: st.Reset(), 0, 0),
}


def parse_form(expr: object) -> st.Form:
    if type(expr) in st.FORM_TYPES:
        return expr
    if not isinstance(expr, (list, tuple)) or not expr:
        raise UnknownForm(expr, "a form expression is a non-empty list")
    head, args = expr[0], list(expr[1:])
    if not isinstance(head, str) or head not in _FORMS:
        raise UnknownForm(head)
    builder, min_args, max_args = _FORMS[head]
    if len(args) < min_args or (max_args is not None and len(args) > max_args):
        raise UnknownForm(head, f"takes {min_args}{'+' if max_args is None else ''} argument(s), got {len(args)}")
    return builder(head, args)


def parse_forms(exprs) -> list[st.Form]:
    """Parse every expression up front so a bad one fails before anything runs."""
    return [parse_form(expr) for expr in exprs]
