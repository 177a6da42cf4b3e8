from __future__ import annotations

import subprocess

import pytest


class SpyRunner:
    """Stands in for ``subprocess.run`` and records every invocation."""

    def __init__(self, returncode: int = 0, output: str = "") -> None:
        self.returncode = returncode
        self.output = output
        self.calls: list[dict] = []

    def __call__(self, args, **kwargs) -> subprocess.CompletedProcess:
        self.calls.append({"args": args, **kwargs})
        return subprocess.CompletedProcess(args, self.returncode, stdout=self.output)


@pytest.fixture
def spy() -> SpyRunner:
    return SpyRunner()


@pytest.fixture
def make_spy():
    return SpyRunner
