"""Exceptions raised while building or running a gnuplot script.

Construction errors (``UnknownForm``, ``UnknownOption``) are raised before any
process is started. ``MissingBinary`` and ``GnuplotFailed`` come from the
execution step.
"""
from __future__ import annotations

from collections.abc import Iterable


class PlotScriptError(Exception):
    """Base class for every error raised by the script builder."""


class UnknownForm(PlotScriptError):
    def __init__(self, head: object, reason: str = "") -> None:
        self.head = head
        message = f"Unknown form: {head!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnknownOption(PlotScriptError, ValueError):
    def __init__(self, names: Iterable[str]) -> None:
        self.names = sorted(names)
        super().__init__(f"Unknown run option(s): {', '.join(self.names)}")


class MissingBinary(PlotScriptError):
    def __init__(self, binary: str, detail: str = "") -> None:
        self.binary = binary
        message = f"gnuplot binary '{binary}' not found. Install gnuplot and ensure it is on PATH."
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class GnuplotFailed(PlotScriptError):
    """gnuplot ran and exited with a nonzero status.

    ``output`` holds the combined stdout/stderr text exactly as captured.
    """

    def __init__(self, output: str, exit_code: int | None = None) -> None:
        self.output = output
        self.exit_code = exit_code
        super().__init__(output.strip() or f"gnuplot exited with status {exit_code}")
