"""Shared dialect handling and error collection for query builders."""

from __future__ import annotations

from typing import Dict, List, Optional

from .dialect import BaseDialect
from .dialects import generic_dialect
from .dialects import resolve_dialect as _lookup_dialect
from .errors import QueryBuildError, StageErrorCollector


class BaseBuilder:
    """Holds a builder's name, its dialect and its stage-tagged errors."""

    def __init__(self, name: str = "", dialect: Optional[BaseDialect] = None) -> None:
        self.name = name.lower()
        self.dialect: Optional[BaseDialect] = dialect if dialect is not None else generic_dialect()
        self.validator = StageErrorCollector()

    def add_stage_error(self, stage: str, err: Optional[Exception]) -> None:
        """Record an error under a logical stage such as FROM or WHERE."""
        self.validator.add_stage_error(stage, err)

    def combine_errors(self) -> Optional[QueryBuildError]:
        """Return a grouped summary of all stage errors, or None."""
        return self.validator.combine_errors()

    def errors_by_stage(self) -> Dict[str, List[Exception]]:
        """Return the recorded errors grouped by stage."""
        return self.validator.errors_by_stage()

    def resolve_dialect(self) -> BaseDialect:
        """Return the dialect, falling back to the generic one when unset."""
        if self.dialect is None:
            self.dialect = generic_dialect()
        return self.dialect

    def has_dialect(self) -> bool:
        """Return True if a dialect is set."""
        return self.dialect is not None

    def has_errors(self) -> bool:
        """Return True if any stage errors were recorded."""
        return self.validator.has_errors()

    def render_from(self, table: str, alias: str = "") -> str:
        """Return the quoted table, followed by ``alias`` when one is given."""
        quoted = self.resolve_dialect().quote_identifier(table)
        return f"{quoted} {alias}" if alias else quoted

    def use_dialect(self, name: str) -> "BaseBuilder":
        """Switch to the dialect called ``name``; empty or unchanged names do nothing."""
        if not name or (self.dialect is not None and self.dialect.dialect_name() == name):
            return self
        self.dialect = _lookup_dialect(name)
        return self

    def validate(self) -> None:
        """Raise if no dialect is set or any stage errors were recorded."""
        if self.dialect is None:
            raise QueryBuildError(
                f"{self.name.upper()}: no dialect set — please assign one "
                "(e.g., generic_dialect())"
            )
        combined = self.validator.combine_errors()
        if combined is not None:
            raise combined