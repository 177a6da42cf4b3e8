from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from errors import UnknownOption


@dataclass(frozen=True)
class RunOptions:
    dry_run: bool = False

    @classmethod
    def parse(cls, options: Mapping[str, object] | None = None) -> "RunOptions":
        """Build options from a mapping, rejecting names that are not recognised."""
        options = dict(options or {})
        unknown = set(options) - {f.name for f in fields(cls)}
        if unknown:
            raise UnknownOption(unknown)
        return cls(dry_run=bool(options.get("dry_run", False)))


@dataclass(frozen=True)
class OutputPath:
    path: str


@dataclass(frozen=True)
class CapturedText:
    text: str


@dataclass(frozen=True)
class ScriptText:
    text: str


@dataclass(frozen=True)
class Failed:
    captured_text: str
    exit_code: int | None = None


ExecutionResult = OutputPath | CapturedText | ScriptText | Failed
