"""Embedding API: build a gnuplot script from forms and optionally run it.

    from builder import gnuplot
    from forms import Bareword, Curve, FlagWord, Plot, Set, Table, Text, VariableRef

    gnuplot([
        Set("terminal", Bareword("pngcairo")),
        Set("output", Text("out.png")),
        Table("$data", [[0, 0], [1, 1], [2, 0]]),
        Plot(Curve(VariableRef("$data"), [FlagWord("with"), Bareword("lines")])),
    ])  # -> "out.png"

Forms may also be given as expressions such as ``["reset"]`` (see
``forms.parser``).
"""
from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable, Mapping

from backends import CapturedText, ExecutionResult, Failed, OutputPath, RunOptions, ScriptText, run_gnuplot
from errors import GnuplotFailed
from forms import assemble, parse_forms

logger = logging.getLogger(__name__)


def execute(
    forms: Iterable[object],
    options: RunOptions | Mapping[str, object] | None = None,
    runner=subprocess.run,
) -> ExecutionResult:
    """Assemble ``forms`` and run them, returning the typed result.

    Options and forms are validated before gnuplot is started, so
    ``UnknownOption`` and ``UnknownForm`` never leave a process behind.
    """
    if not isinstance(options, RunOptions):
        options = RunOptions.parse(options)
    script = assemble(parse_forms(forms))
    logger.debug("Assembled script (output path: %s)", script.output_path)
    return run_gnuplot(script.text, script.output_path, options, runner=runner)


def gnuplot(forms: Iterable[object], *, runner=subprocess.run, **options) -> str:
    """Run ``forms`` and return the script, the output path or gnuplot's output.

    A nonzero gnuplot exit raises ``GnuplotFailed`` carrying the captured text.
    """
    result = execute(forms, options, runner=runner)
    if isinstance(result, Failed):
        raise GnuplotFailed(result.captured_text, result.exit_code)
    if isinstance(result, OutputPath):
        return result.path
    if isinstance(result, (ScriptText, CapturedText)):
        return result.text
    raise TypeError(f"Unexpected execution result: {result!r}")
