from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from forms.statements import check_form, declared_output, render_form


@dataclass(frozen=True)
class AssembledScript:
    text: str
    # Path named by the last ``set output`` form, if any
    output_path: str | None = None


def assemble(forms: Iterable[object], render_fn: Callable[[object], str] = render_form) -> AssembledScript:
    forms = list(forms)
    for form in forms:
        check_form(form)

    fragments: list[str] = []
    output_path: str | None = None
    for form in forms:
        fragments.append(render_fn(form))
        is_output, path = declared_output(form)
        if is_output:
            output_path = path

    return AssembledScript(text="\n".join(fragments), output_path=output_path)
