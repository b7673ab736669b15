"""Builder for INSERT ... ON CONFLICT statements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .base import BaseBuilder
from .dialect import BaseDialect
from .dialects import resolve_dialect as _lookup_dialect
from .errors import QueryBuildError
from .insert import InsertBuilder


@dataclass(frozen=True)
class Assignment:
    """A ``column = expression`` update applied on conflict."""

    column: str
    expr: str


class UpsertBuilder(BaseBuilder):
    """Builds an INSERT with an ON CONFLICT clause that updates or does nothing."""

    def __init__(self, dialect: Optional[BaseDialect] = None) -> None:
        super().__init__("upsert", dialect)
        self._insert = InsertBuilder(dialect)
        self.conflict_columns: List[str] = []
        self.update_set: List[Assignment] = []
        self._returning: List[str] = []

    def into(self, table: str) -> "UpsertBuilder":
        """Set the target table."""
        self._insert.into(table)
        return self

    def columns(self, *args: str) -> "UpsertBuilder":
        """Set the insert columns."""
        self._insert.columns(*args)
        return self

    def values(self, *args: Any) -> "UpsertBuilder":
        """Append one row of insert values."""
        self._insert.values(*args)
        return self

    def on_conflict(self, *args: str) -> "UpsertBuilder":
        """Append columns that identify a conflict."""
        self.conflict_columns.extend(args)
        return self

    def returning(self, *args: str) -> "UpsertBuilder":
        """Append columns to the RETURNING clause."""
        dialect = self.resolve_dialect()
        if not dialect.supports_returning() and self._returning:
            self.add_stage_error(
                "RETURNING",
                ValueError(f"UPSERT: RETURNING is not supported for dialect: {dialect.dialect_name()}"),
            )
        else:
            self._returning.extend(args)
        return self

    def do_update_set(self, *args: Assignment) -> "UpsertBuilder":
        """Append assignments applied when a conflict occurs."""
        self.update_set.extend(args)
        return self

    def use_dialect(self, name: str) -> "UpsertBuilder":
        """Switch both this builder and its insert part to the dialect called ``name``."""
        resolved = _lookup_dialect(name)
        self._insert.dialect = resolved
        self.dialect = resolved
        return self

    def build(self) -> Tuple[str, List[Any]]:
        """Return the SQL text and its arguments, or raise if the builder is invalid."""
        try:
            insert_sql, args = self._insert.build_insert_only()
        except QueryBuildError as exc:
            raise QueryBuildError(f"UPSERT: {exc}") from exc

        dialect = self.resolve_dialect()
        tokens = [insert_sql]

        if self.conflict_columns:
            if any(column == "" for column in self.conflict_columns):
                raise QueryBuildError("UPSERT: empty conflict column name")
            quoted = ", ".join(dialect.quote_identifier(column) for column in self.conflict_columns)
            tokens.append(f"ON CONFLICT ({quoted})")

        if not self.update_set:
            tokens.append("DO NOTHING")
        else:
            if any(a.column == "" or a.expr == "" for a in self.update_set):
                raise QueryBuildError("UPSERT: column or expression is empty")
            assignments = ", ".join(
                f"{dialect.quote_identifier(a.column)} = {a.expr}" for a in self.update_set
            )
            tokens += ["DO UPDATE SET", assignments]

        if self._returning:
            if not dialect.supports_returning():
                raise QueryBuildError(f"RETURNING not supported in dialect: {dialect.dialect_name()}")
            tokens += ["RETURNING", ", ".join(dialect.quote_identifier(c) for c in self._returning)]

        return " ".join(tokens), args