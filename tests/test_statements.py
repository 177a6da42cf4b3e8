"""Tests for per-form fragment rendering."""

from __future__ import annotations

import pytest

from errors import UnknownForm
from forms.statements import (
    Comment,
    ConstDef,
    Curve,
    Data,
    FunctionDef,
    Plot,
    Raw,
    Reset,
    Set,
    Table,
    Unset,
    declared_output,
    render_form,
)
from forms.values import Bareword, FlagWord, Literal, Sequence, Text, VariableRef


def test_set_joins_rendered_values_with_spaces() -> None:
    assert render_form(Set("terminal", [Bareword("pngcairo")])) == "set terminal pngcairo"
    assert render_form(Set("output", Text("out.png"))) == 'set output "out.png"'
    assert render_form(Set("key", [FlagWord(":left"), FlagWord("top")])) == "set key left top"
    assert render_form(Set("grid")) == "set grid"


def test_set_with_sequence_values() -> None:
    form = Set("xtics", [Sequence((0, 5)), Sequence((10,))])
    assert render_form(form) == "set xtics 0,5 [10]"


def test_unset_uses_its_own_name() -> None:
    assert render_form(Unset("key")) == "unset key"
    assert render_form(Unset("border")) == "unset border"


def test_curve_with_reference_source() -> None:
    curve = Curve(VariableRef("$data"), [FlagWord("with"), Bareword("lines")])
    assert render_form(curve) == "$data with lines"


def test_curve_with_value_source() -> None:
    assert render_form(Curve(Literal("sin(x)"), [FlagWord("title"), Text("sine")])) == 'sin(x) title "sine"'
    assert render_form(Curve(Text("data.dat"), [FlagWord("using"), Literal("1:2")])) == '"data.dat" using 1:2'
    assert render_form(Curve(Literal("cos(x)"))) == "cos(x)"


def test_plot_joins_curves_with_continuation() -> None:
    form = Plot([
        Curve(Literal("sin(x)"), [FlagWord("title"), Text("sin")]),
        Curve(Literal("cos(x)"), [FlagWord("title"), Text("cos")]),
    ])
    assert render_form(form) == 'plot sin(x) title "sin",\n     cos(x) title "cos"'


def test_plot_accepts_a_single_curve_and_bare_sources() -> None:
    assert render_form(Plot(Curve(VariableRef("$d")))) == "plot $d"
    assert render_form(Plot([Literal("x**2")])) == "plot x**2"


def test_data_block() -> None:
    form = Data("$d", ["0 0", "1 1", "2 0"])
    assert render_form(form) == "$d << EOD\n0 0\n1 1\n2 0\nEOD"


def test_table_matches_equivalent_data_block() -> None:
    table = Table("$data", [[0, 0], [1, 1], [2, 0]])
    assert render_form(table) == "$data << EOD\n0 0\n1 1\n2 0\nEOD"
    assert render_form(table) == render_form(Data("$data", ["0 0\n1 1\n2 0"]))


def test_table_cells_are_rendered() -> None:
    table = Table("$t", [[1.5, Text("a b")], [Literal("NaN"), 2]])
    assert render_form(table) == '$t << EOD\n1.5 "a b"\nNaN 2\nEOD'


def test_function_and_constant_definitions() -> None:
    assert render_form(FunctionDef("f", ["x", "y"], "x*y + a")) == "f(x,y) = x*y + a"
    assert render_form(FunctionDef("g", "t", "sin(t)")) == "g(t) = sin(t)"
    assert render_form(ConstDef("a", "3.5")) == "a = 3.5"
    assert render_form(ConstDef("label", Text("peak"))) == 'label = "peak"'


def test_comment_concatenates_parts() -> None:
    assert render_form(Comment(["generated ", "by ", 3])) == "# generated by 3"
    assert render_form(Comment("hello")) == "# hello"


def test_raw_is_passed_through() -> None:
    text = 'set label 1 "a\\"b" at 0,0'
    assert render_form(Raw(text)) == text


def test_reset() -> None:
    assert render_form(Reset()) == "reset"


def test_unrecognised_form_raises() -> None:
    with pytest.raises(UnknownForm):
        render_form(("splot", "x"))
    with pytest.raises(UnknownForm):
        render_form(Text("not a form"))


def test_declared_output() -> None:
    assert declared_output(Set("output", Text("a.png"))) == (True, "a.png")
    assert declared_output(Set("output", Literal("'b.png'"))) == (True, "'b.png'")
    assert declared_output(Set("output")) == (True, None)
    assert declared_output(Set("terminal", Bareword("png"))) == (False, None)
    assert declared_output(Reset()) == (False, None)


def test_table_rejects_rows_that_are_not_sequences() -> None:
    with pytest.raises(TypeError):
        Table("$t", ["0 0"])
    with pytest.raises(TypeError):
        Table("$t", [[0, 0], 5])
