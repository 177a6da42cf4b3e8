from backends.base import CapturedText, ExecutionResult, Failed, OutputPath, RunOptions, ScriptText
from backends.gnuplot_backend import run_gnuplot

__all__ = [
    "CapturedText",
    "ExecutionResult",
    "Failed",
    "OutputPath",
    "RunOptions",
    "ScriptText",
    "run_gnuplot",
]
