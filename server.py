"""FastAPI server exposing the script builder over HTTP.

Start with:
    uv run uvicorn server:app --host 127.0.0.1 --port 8000 --reload

Endpoints
---------
POST   /scripts    Build a script from form expressions; run it unless dry_run
GET    /health     Report the configured gnuplot binary

Form expressions use the JSON encoding described in ``forms.parser``.
"""
from __future__ import annotations

import logging
import subprocess
from typing import Any, Literal

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

import config as cfg
from backends import CapturedText, Failed, OutputPath, RunOptions, ScriptText
from builder import execute
from errors import MissingBinary, UnknownForm

logger = logging.getLogger(__name__)

app = FastAPI(
    title="gnuplot script builder",
    description="Assemble gnuplot scripts from form expressions and run them.",
)


# ── Request / response models ─────────────────────────────────────────────────

class ScriptRequest(BaseModel):
    forms: list[Any]
    dry_run: bool = False


class ScriptResponse(BaseModel):
    kind: Literal["script", "output_path", "captured"]
    result: str


def get_runner():
    return subprocess.run


# ── Endpoints ─────────────────────────────────────────────────────────────────

@app.post("/scripts", response_model=ScriptResponse)
def build_script(body: ScriptRequest, runner=Depends(get_runner)):
    """Build the script and, unless ``dry_run`` is set, run it through gnuplot."""
    try:
        result = execute(body.forms, RunOptions(dry_run=body.dry_run), runner=runner)
    except (UnknownForm, ValueError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except MissingBinary as exc:
        logger.error("gnuplot unavailable: %s", exc)
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    if isinstance(result, Failed):
        raise HTTPException(
            status_code=502,
            detail={"message": "gnuplot failed", "exit_code": result.exit_code, "output": result.captured_text},
        )
    if isinstance(result, ScriptText):
        return ScriptResponse(kind="script", result=result.text)
    if isinstance(result, OutputPath):
        return ScriptResponse(kind="output_path", result=result.path)
    if isinstance(result, CapturedText):
        return ScriptResponse(kind="captured", result=result.text)
    logger.error("Unexpected execution result: %r", result)
    raise HTTPException(status_code=500, detail="Unexpected execution result")


@app.get("/health")
def health():
    return {"status": "ok", "gnuplot": cfg.GNUPLOT_PATH}


# ── Dev entry-point ───────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server:app",
        host=cfg.SERVER_HOST,
        port=cfg.SERVER_PORT,
        reload=True,
    )
