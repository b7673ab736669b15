"""Conditions for WHERE clauses: parsing, validation and typed constructors."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple, Union

_CONDITION_RE = re.compile(
    r"(.+?)\s+(NOT IN|IN|BETWEEN|<>|!=|>=|<=|LIKE|=|>|<)\s+(.+)",
    re.IGNORECASE,
)
_DOLLAR_PLACEHOLDER_RE = re.compile(r"\$\d+")
_INTEGER_RE = re.compile(r"[+-]?\d+")

_PLACEHOLDER_PATTERNS = (
    (" BETWEEN ? AND ?", "BETWEEN", "BETWEEN"),
    (" NOT LIKE ?", "NOT LIKE", "NOT LIKE"),
    (" LIKE ?", "LIKE", "LIKE"),
    (" NOT IN ?", "NOT IN", "NOT IN"),
    (" IN ?", "IN", "IN"),
    (" >= ?", ">=", ">="),
    (" <= ?", "<=", "<="),
    (" <> ?", "<>", "<>"),
    (" != ?", "!=", "!="),
    (" > ?", ">", ">"),
    (" < ?", "<", "<"),
    (" = ?", "=", "="),
)


class ConditionType(str, Enum):
    """How a condition is joined to the ones before it."""

    SIMPLE = "SIMPLE"
    AND = "AND"
    OR = "OR"

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)


def _label(condition_type: Union[ConditionType, str]) -> str:
    return condition_type.value if isinstance(condition_type, ConditionType) else str(condition_type)


@dataclass
class Condition:
    """A conditional expression such as ``status = ?`` with its bound values."""

    type: Union[ConditionType, str] = ConditionType.SIMPLE
    key: str = ""
    operator: str = ""
    values: List[Any] = field(default_factory=list)
    alias: str = ""
    raw: str = ""
    error: Optional[Exception] = None

    def is_valid(self) -> bool:
        """Return True if the condition has a key and no recorded error."""
        return bool(self.key.strip()) and self.error is None


def _failed(message: str) -> Condition:
    return Condition(error=ValueError(message))


def _extract_condition_parts(text: str) -> Optional[Tuple[str, str, str]]:
    match = _CONDITION_RE.fullmatch(text)
    if match is None:
        return None
    return match.group(1).strip(), match.group(2).upper(), match.group(3).strip()


def all_same_type(values: Sequence[Any]) -> bool:
    """Return True if every value has exactly the same type."""
    if len(values) < 2:
        return True
    first = type(values[0])
    return all(type(value) is first for value in values[1:])


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def are_compatible_types(*args: Any) -> bool:
    """Return True if at least two values share a compatible type group."""
    if len(args) < 2:
        return False
    first, rest = args[0], args[1:]
    if isinstance(first, str):
        return all(isinstance(value, str) for value in rest)
    if _is_number(first):
        return all(_is_number(value) for value in rest)
    if isinstance(first, datetime):
        return all(isinstance(value, datetime) for value in rest)
    return False


def contains_unbound_placeholder(text: str) -> bool:
    """Return True if the text holds a ``?``, ``:name`` or ``$n`` placeholder."""
    text = text.strip()
    return "?" in text or ":" in text or _DOLLAR_PLACEHOLDER_RE.search(text) is not None


def infer_literal_type(text: str) -> Any:
    """Convert a literal to int, float or bool where it reads as one, else keep the string."""
    text = text.strip()
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    if "_" not in text:
        try:
            return float(text)
        except ValueError:
            pass
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return text


def is_placeholder_expression(text: str) -> bool:
    """Return True if the text has a ``?`` but none of the operator characters."""
    return "?" in text and not any(ch in text for ch in "=<>!IN")


def parse_placeholder_pattern(text: str) -> Optional[Tuple[str, str]]:
    """Return the upper-cased field and operator of a ``field OP ?`` pattern, or None."""
    upper = text.upper()
    for pattern, separator, operator in _PLACEHOLDER_PATTERNS:
        if pattern in upper:
            return upper.split(separator)[0].strip(), operator
    return None


def condition_with_operator(
    condition_type: Union[ConditionType, str], field: str, operator: str, *args: Any
) -> Condition:
    """Build a condition with an explicit operator; a single list argument is spread."""
    values = list(args)
    if len(values) == 1 and isinstance(values[0], (list, tuple)):
        values = list(values[0])

    condition = Condition(type=condition_type, key=field, operator=operator, values=values)

    if not field.strip() or not operator.strip() or not values:
        condition.error = ValueError(
            f"{_label(condition_type)}: invalid condition parameters: "
            f"field='{field}', operator='{operator}', values={len(values)}"
        )
        return condition

    if operator in ("IN", "NOT IN"):
        condition.raw = f"{field} {operator} (:{field})"
    elif operator == "BETWEEN":
        if len(values) == 2:
            condition.raw = f"{field} BETWEEN :{field}_start AND :{field}_end"
    else:
        condition.raw = f"{field} {operator} :{field}"
    return condition


def new_condition(condition_type: Union[ConditionType, str], name: str, *args: Any) -> Condition:
    """Parse ``name`` and any values into a condition, recording problems on it."""
    label = _label(condition_type)

    if not args:
        parts = _extract_condition_parts(name)
        if parts is None or not parts[2]:
            return _failed("unable to parse condition")
        column, operator, literal = parts
        if contains_unbound_placeholder(literal):
            return _failed(f"placeholder without a value for {name}=")
        return condition_with_operator(condition_type, column, operator, infer_literal_type(literal))

    if len(args) > 2:
        return condition_with_operator(condition_type, name, "IN", *args)

    parts = _extract_condition_parts(name)
    if parts is None:
        return condition_with_operator(condition_type, name, "=", args[0])
    column, operator, literal = parts

    values = list(args)
    if len(values) == 1 and isinstance(values[0], (list, tuple)):
        values = list(values[0])
        if not values:
            return condition_with_operator(
                condition_type, column, operator, infer_literal_type(literal)
            )

    if operator in ("IN", "NOT IN"):
        if len(values) == 1:
            operator = "=" if operator == "IN" else "!="
        elif not all_same_type(values):
            return _failed(f"{label}: values for {operator} must be of the same type")
    elif operator == "BETWEEN":
        if len(values) != 2:
            return _failed(f"{label}: BETWEEN requires exactly 2 values")
        if not all_same_type(values):
            return _failed(f"{label}: BETWEEN values must be of the same type")

    return condition_with_operator(condition_type, column, operator, *values)


def condition_between(
    condition_type: Union[ConditionType, str], field: str, start: Any, end: Any
) -> Condition:
    """Build a BETWEEN condition from two compatible, non-empty values."""
    label = _label(condition_type)
    if not field or start is None or end is None:
        return _failed(f"{label}: BETWEEN requires a field and two non-nil values")
    if start == "" and isinstance(start, str):
        return _failed(f"{label}: BETWEEN start value cannot be empty string")
    if end == "" and isinstance(end, str):
        return _failed(f"{label}: BETWEEN end value cannot be empty string")
    if not are_compatible_types(start, end):
        return _failed(
            f"{label}: BETWEEN values must be of compatible types: "
            f"got {type(start).__name__} and {type(end).__name__}"
        )
    return condition_with_operator(condition_type, field, "BETWEEN", start, end)


def condition_in(condition_type: Union[ConditionType, str], field: str, *args: Any) -> Condition:
    """Build an IN condition from compatible values."""
    if not are_compatible_types(*args):
        return _failed(f'{_label(condition_type)}: IN values must be of compatible types on: "{field}"')
    return condition_with_operator(condition_type, field, "IN", *args)


def condition_not_in(condition_type: Union[ConditionType, str], field: str, *args: Any) -> Condition:
    """Build a NOT IN condition from compatible values."""
    if not are_compatible_types(*args):
        return _failed(f"{_label(condition_type)}: NOT IN values must be of compatible types")
    return condition_with_operator(condition_type, field, "NOT IN", *args)


def condition_greater_than(condition_type: Union[ConditionType, str], field: str, value: Any) -> Condition:
    """Build a ``>`` condition."""
    return condition_with_operator(condition_type, field, ">", value)


def condition_greater_than_or_equal(
    condition_type: Union[ConditionType, str], field: str, value: Any
) -> Condition:
    """Build a ``>=`` condition."""
    return condition_with_operator(condition_type, field, ">=", value)


def condition_less_than(condition_type: Union[ConditionType, str], field: str, value: Any) -> Condition:
    """Build a ``<`` condition."""
    return condition_with_operator(condition_type, field, "<", value)


def condition_less_than_or_equal(
    condition_type: Union[ConditionType, str], field: str, value: Any
) -> Condition:
    """Build a ``<=`` condition."""
    return condition_with_operator(condition_type, field, "<=", value)


def condition_like(condition_type: Union[ConditionType, str], field: str, pattern: Any) -> Condition:
    """Build a LIKE condition."""
    return condition_with_operator(condition_type, field, "LIKE", pattern)


def condition_not_equal(condition_type: Union[ConditionType, str], field: str, value: Any) -> Condition:
    """Build a ``!=`` condition."""
    return condition_with_operator(condition_type, field, "!=", value)