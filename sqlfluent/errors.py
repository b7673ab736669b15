"""Exceptions and stage-tagged error collection for query builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


class QueryBuildError(Exception):
    """Raised when a query cannot be built."""


class BuilderValidationError(QueryBuildError):
    """Raised when a builder has collected validation errors across its stages."""

    def __init__(self, message: str, stage_errors: Optional[List["StageError"]] = None):
        super().__init__(message)
        self.stage_errors: List[StageError] = list(stage_errors or [])


@dataclass
class ClauseErrors:
    """Errors gathered for one clause token, such as WHERE or JOIN."""

    token: str
    errors: List[Exception] = field(default_factory=list)


@dataclass
class StageError:
    """A validation failure tagged with the builder stage it belongs to."""

    stage: str
    error: Exception

    def __str__(self) -> str:
        return f"[{self.stage}] {self.error}"


@dataclass
class StageErrorCollector:
    """Accumulates stage errors and summarises them for builder validation."""

    errors: List[StageError] = field(default_factory=list)

    def add_stage_error(self, stage: str, err: Optional[Exception]) -> None:
        """Record ``err`` under ``stage``; ``None`` is ignored."""
        if err is not None:
            self.errors.append(StageError(stage=stage, error=err))

    def has_errors(self) -> bool:
        """Return True if any stage errors were recorded."""
        return bool(self.errors)

    def errors_by_stage(self) -> Dict[str, List[Exception]]:
        """Group recorded errors by stage, in the order stages first appeared."""
        grouped: Dict[str, List[Exception]] = {}
        for entry in self.errors:
            grouped.setdefault(str(entry.stage), []).append(entry.error)
        return grouped

    def combine_errors(self) -> Optional[BuilderValidationError]:
        """Return one error summarising all stages, or None when there are none."""
        if not self.errors:
            return None
        lines = ["builder validation failed:"]
        for stage, errs in self.errors_by_stage().items():
            if len(errs) == 1:
                lines.append(f"  - [{stage}] {errs[0]}")
            else:
                lines.append(f"  - [{stage}]")
                lines.extend(f"     - {err}" for err in errs)
        return BuilderValidationError("\n".join(lines), self.errors)

    def __str__(self) -> str:
        combined = self.combine_errors()
        return "" if combined is None else str(combined)