"""Builder for DELETE statements."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from .base import BaseBuilder
from .binder import ParamBinder
from .condition import Condition, ConditionType, new_condition
from .dialect import BaseDialect
from .errors import QueryBuildError
from .renderer import render_conditions


class DeleteBuilder(BaseBuilder):
    """Builds a DELETE statement with optional WHERE and LIMIT clauses."""

    def __init__(self, dialect: Optional[BaseDialect] = None) -> None:
        super().__init__("delete", dialect)
        self._table = ""
        self.alias = ""
        self.conditions: List[Condition] = []
        self._limit = -1

    def from_(self, table: str, alias: str = "") -> "DeleteBuilder":
        """Set the table rows are deleted from."""
        if table == "":
            self.add_stage_error("FROM", ValueError("table is empty"))
        self._table = table
        if alias:
            self.alias = alias.strip()
        return self

    def _add_condition(self, condition_type: ConditionType, condition: str, args: tuple) -> Condition:
        parsed = new_condition(condition_type, condition, *args)
        if not parsed.is_valid():
            self.add_stage_error("WHERE", parsed.error)
        return parsed

    def where(self, condition: str, *args: Any) -> "DeleteBuilder":
        """Replace the WHERE clause with a single condition."""
        self.conditions = [self._add_condition(ConditionType.SIMPLE, condition, args)]
        return self

    def and_where(self, condition: str, *args: Any) -> "DeleteBuilder":
        """Append a condition joined with AND."""
        self.conditions.append(self._add_condition(ConditionType.AND, condition, args))
        return self

    def or_where(self, condition: str, *args: Any) -> "DeleteBuilder":
        """Append a condition joined with OR."""
        self.conditions.append(self._add_condition(ConditionType.OR, condition, args))
        return self

    def limit(self, n: int) -> "DeleteBuilder":
        """Set the maximum number of rows to delete; negative means no limit."""
        self._limit = n
        return self

    def build(self) -> Tuple[str, List[Any]]:
        """Return the SQL text and its arguments, or raise if the builder is invalid."""
        if self._table == "":
            self.add_stage_error("FROM", ValueError("table is empty"))

        where_clause = ""
        args: List[Any] = []
        if self.conditions and self.dialect is not None:
            try:
                where_clause, args = render_conditions(
                    self.dialect, self.conditions, ParamBinder(self.dialect, 1)
                )
            except QueryBuildError as exc:
                self.add_stage_error("WHERE", exc)

        self.validate()
        dialect = self.resolve_dialect()

        tokens = ["DELETE FROM", dialect.quote_identifier(self._table)]
        if where_clause:
            tokens += ["WHERE", where_clause]
        if self._limit >= 0:
            limit_clause = dialect.build_limit_offset(self._limit, -1)
            if limit_clause:
                tokens.append(limit_clause)
        return " ".join(tokens), args