"""Builder for INSERT statements."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from .base import BaseBuilder
from .binder import ParamBinder
from .dialect import BaseDialect
from .fields import FieldToken, field, fields_from_expr


class InsertBuilder(BaseBuilder):
    """Builds an INSERT statement, optionally with a RETURNING clause."""

    def __init__(self, dialect: Optional[BaseDialect] = None) -> None:
        super().__init__("insert", dialect)
        self._table = ""
        self._columns: List[FieldToken] = []
        self._rows: List[List[Any]] = []
        self._returning: List[FieldToken] = []

    def into(self, table: str) -> "InsertBuilder":
        """Set the target table."""
        if table == "":
            self.add_stage_error("INTO", ValueError("requires a target table"))
        else:
            self._table = table
        return self

    def columns(self, *args: str) -> "InsertBuilder":
        """Replace the column list; aliased columns are rejected and recorded as errors."""
        self._columns = []
        for name in args:
            token = field(name)
            if token.alias:
                self.add_stage_error(
                    "COLUMNS",
                    ValueError(f"column aliasing is not allowed: '{token.name} AS {token.alias}'"),
                )
                continue
            self._columns.append(token)
        return self

    def values(self, *args: Any) -> "InsertBuilder":
        """Append one row of values."""
        self._rows.append(list(args))
        return self

    def returning(self, *args: str) -> "InsertBuilder":
        """Append column expressions to the RETURNING clause."""
        for expr in args:
            self._returning.extend(fields_from_expr(expr))
        return self

    def build(self) -> Tuple[str, List[Any]]:
        """Return the SQL text and arguments, with RETURNING when any columns were given."""
        return self._build_query(bool(self._returning))

    def build_insert_only(self) -> Tuple[str, List[Any]]:
        """Return the SQL text and arguments without any RETURNING clause."""
        return self._build_query(False)

    def _build_query(self, with_returning: bool) -> Tuple[str, List[Any]]:
        dialect = self.resolve_dialect()

        if self._table == "":
            self.add_stage_error("FROM", ValueError("requires a target table"))
        if not self._columns:
            self.add_stage_error("INTO", ValueError("at least one column is required"))
        if not self._rows:
            self.add_stage_error("VALUES", ValueError("at least one set of values is required"))
        if with_returning and not dialect.supports_returning():
            self.add_stage_error("RETURNING", ValueError("at least one set of values is required"))

        expected = len(self._columns)
        binder = ParamBinder(dialect)
        args: List[Any] = []
        row_placeholders = []
        quoted_columns = [dialect.quote_identifier(col.name) for col in self._columns]

        for number, row in enumerate(self._rows, start=1):
            if len(row) != expected:
                self.add_stage_error(
                    "RETURNING",
                    ValueError(f"row {number} has {len(row)} values, expected {expected}"),
                )
            placeholders = binder.bind_many(*row)
            args.extend(row)
            row_placeholders.append(f"({', '.join(placeholders)})")

        self.validate()

        tokens = [
            "INSERT INTO",
            dialect.render_from(self._table, ""),
            f"({', '.join(quoted_columns)})",
            "VALUES",
            ", ".join(row_placeholders),
        ]
        if with_returning:
            tokens += ["RETURNING", ", ".join(dialect.quote_identifier(col.name) for col in self._returning)]
        return " ".join(tokens), args