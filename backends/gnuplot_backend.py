import logging
import os
import subprocess
from pathlib import Path

from backends.base import CapturedText, ExecutionResult, Failed, OutputPath, RunOptions, ScriptText
from config import GNUPLOT_PATH
from errors import MissingBinary

logger = logging.getLogger(__name__)


def run_gnuplot(
    script: str,
    output_path: str | None = None,
    options: RunOptions = RunOptions(),
    runner=subprocess.run,
) -> ExecutionResult:
    """Feed ``script`` to gnuplot on stdin and classify the outcome.

    stdout and stderr are captured as one stream. ``runner`` has the
    ``subprocess.run`` signature; tests pass a spy in its place.
    """
    if options.dry_run:
        logger.debug("Dry run; gnuplot not invoked (%d chars of script)", len(script))
        return ScriptText(script)

    binary = _resolve_binary()
    logger.debug("Running %s on %d chars of script", binary, len(script))

    try:
        result = runner(
            [binary],
            input=script,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except (FileNotFoundError, PermissionError) as exc:
        raise MissingBinary(binary, str(exc)) from exc

    output = result.stdout or ""
    if result.returncode != 0:
        logger.warning("gnuplot exited with status %d", result.returncode)
        return Failed(output, exit_code=result.returncode)

    if output_path is not None:
        return OutputPath(output_path)
    return CapturedText(output)


def _resolve_binary() -> str:
    """Return the gnuplot executable, treating GNUPLOT_PATH as a directory hint."""
    if os.path.isdir(GNUPLOT_PATH):
        return str(Path(GNUPLOT_PATH) / "gnuplot")
    return GNUPLOT_PATH
