"""Tests for script assembly and output path tracking."""

from __future__ import annotations

import pytest

from errors import UnknownForm
from forms.assembler import assemble
from forms.statements import Comment, Plot, Raw, Reset, Set, Unset, render_form
from forms.values import Bareword, Literal, Text


def test_fragments_joined_in_order() -> None:
    forms = [Reset(), Comment("demo"), Set("grid"), Plot([Literal("sin(x)")]), Unset("grid")]
    script = assemble(forms)
    assert script.text == "reset\n# demo\nset grid\nplot sin(x)\nunset grid"
    assert script.text == "\n".join(render_form(f) for f in forms)
    assert script.output_path is None


def test_output_path_recorded_without_quotes() -> None:
    script = assemble([Set("terminal", Bareword("png")), Set("output", Text("file.png"))])
    assert script.output_path == "file.png"


def test_last_output_wins() -> None:
    script = assemble([
        Set("output", Text("first.png")),
        Raw("plot x"),
        Set("output", Text("second.png")),
    ])
    assert script.output_path == "second.png"


def test_bare_set_output_clears_path() -> None:
    script = assemble([Set("output", Text("a.png")), Set("output")])
    assert script.output_path is None


def test_empty_script() -> None:
    script = assemble([])
    assert script.text == ""
    assert script.output_path is None


def test_custom_render_fn() -> None:
    script = assemble([Reset(), Set("grid")], render_fn=lambda form: type(form).__name__)
    assert script.text == "Reset\nSet"


def test_unknown_form_rejected_before_rendering() -> None:
    rendered = []

    def render_fn(form):
        rendered.append(form)
        return render_form(form)

    with pytest.raises(UnknownForm):
        assemble([Reset(), "set grid"], render_fn=render_fn)
    assert rendered == []
