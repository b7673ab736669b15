"""Builder for UPDATE statements."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from .base import BaseBuilder
from .binder import ParamBinder
from .condition import Condition, ConditionType, new_condition
from .dialect import BaseDialect
from .errors import QueryBuildError
from .fields import FieldToken, field
from .renderer import render_conditions


class UpdateBuilder(BaseBuilder):
    """Builds an UPDATE statement with SET assignments and WHERE conditions."""

    def __init__(self, dialect: Optional[BaseDialect] = None) -> None:
        super().__init__("update", dialect)
        self._table = ""
        self.assignments: List[FieldToken] = []
        self.conditions: List[Condition] = []

    def table(self, name: str) -> "UpdateBuilder":
        """Set the table to update."""
        self._table = name
        return self

    def set(self, column: str, value: Any) -> "UpdateBuilder":
        """Add a ``column = value`` assignment."""
        self.assignments.append(field(column).with_value(value))
        return self

    def _make_condition(self, condition_type: ConditionType, condition: str, args: tuple) -> Condition:
        parsed = new_condition(condition_type, condition, list(args))
        if not parsed.is_valid():
            self.add_stage_error("WHERE", parsed.error)
        return parsed

    def where(self, condition: str, *args: Any) -> "UpdateBuilder":
        """Replace the WHERE clause with a single condition."""
        self.conditions = [self._make_condition(ConditionType.SIMPLE, condition, args)]
        return self

    def and_where(self, condition: str, *args: Any) -> "UpdateBuilder":
        """Append a condition joined with AND."""
        self.conditions.append(self._make_condition(ConditionType.AND, condition, args))
        return self

    def or_where(self, condition: str, *args: Any) -> "UpdateBuilder":
        """Append a condition joined with OR."""
        self.conditions.append(self._make_condition(ConditionType.OR, condition, args))
        return self

    def use_dialect(self, name: str) -> "UpdateBuilder":
        """Switch to the dialect called ``name``."""
        super().use_dialect(name)
        return self

    def build(self) -> Tuple[str, List[Any]]:
        """Return the SQL text and its arguments, or raise if the builder is invalid."""
        if self._table == "":
            self.add_stage_error("FROM", ValueError("requires a target table"))
        if not self.assignments:
            self.add_stage_error("SET", ValueError("must define at least one column assignment"))

        dialect = self.resolve_dialect()
        sets = []
        args: List[Any] = []
        for assignment in self.assignments:
            if assignment.alias:
                self.add_stage_error(
                    "SET",
                    ValueError(
                        f"column aliasing is not supported: '{assignment.name} AS {assignment.alias}'"
                    ),
                )
                continue
            name = assignment.name if assignment.is_raw else dialect.quote_identifier(assignment.name)
            sets.append(f"{name} = {dialect.placeholder(len(args) + 1)}")
            args.append(assignment.value)

        tokens = ["UPDATE", dialect.quote_identifier(self._table), "SET", ", ".join(sets)]

        if self.conditions:
            binder = ParamBinder(dialect, len(args) + 1)
            try:
                where_clause, condition_args = render_conditions(dialect, self.conditions, binder)
            except QueryBuildError as exc:
                raise QueryBuildError(f"UPDATE: {exc}") from exc
            tokens += ["WHERE", where_clause]
            args.extend(condition_args)

        self.validate()
        return " ".join(tokens), args