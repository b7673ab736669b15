"""Field and table tokens used to describe columns and targets."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, List

_COMMA_MESSAGE = (
    "Field: comma-separated values not allowed in a single call. "
    "Call Field(...) separately for each."
)


@dataclass(frozen=True)
class FieldToken:
    """A column or expression with optional alias, raw flag and bound value."""

    name: str = ""
    alias: str = ""
    is_raw: bool = False
    value: Any = None

    def with_alias(self, alias: str) -> "FieldToken":
        """Return a copy carrying ``alias``."""
        return replace(self, alias=alias)

    def with_value(self, value: Any) -> "FieldToken":
        """Return a copy carrying the bound ``value``."""
        return replace(self, value=value)

    def is_valid(self) -> bool:
        """Return True if the field has a non-blank name."""
        return bool(self.name.strip())


def field(*args: str) -> FieldToken:
    """Resolve one column, as ``field("a AS b")`` or ``field("a", "b")``."""
    if not args:
        raise TypeError("field() requires a column expression")
    if len(args) == 2:
        return FieldToken(name=args[0].strip(), alias=args[1].strip())

    expr = args[0].strip()
    if "," in expr:
        raise ValueError(_COMMA_MESSAGE)

    parts = expr.split(" AS ", 1)
    if len(parts) == 2:
        return FieldToken(name=parts[0].strip(), alias=parts[1].strip())
    return FieldToken(name=expr)


def field_expr(expression: str, alias: str) -> FieldToken:
    """Return a raw, unescaped expression token with an optional alias."""
    return FieldToken(name=expression, alias=alias, is_raw=True)


def fields_from_expr(expr: str) -> List[FieldToken]:
    """Split a comma-separated list of field expressions into tokens."""
    return [field(part.strip()) for part in expr.split(",")]


@dataclass
class Table:
    """A table reference with an optional alias; both are trimmed."""

    name: str = ""
    alias: str = ""

    def __post_init__(self) -> None:
        self.name = self.name.strip()
        self.alias = self.alias.strip()

    def is_valid(self) -> bool:
        """Return True if the table has a name."""
        return self.name != ""

    def __str__(self) -> str:
        return f"{self.name} {self.alias}" if self.alias else self.name