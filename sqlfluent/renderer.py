"""Rendering of condition lists into WHERE clause text and bound arguments."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

from .binder import ParamBinder
from .condition import Condition, ConditionType
from .dialect import BaseDialect
from .errors import QueryBuildError

_PREFIXES = {
    ConditionType.SIMPLE: "",
    ConditionType.AND: "AND ",
    ConditionType.OR: "OR ",
}


def append_condition(existing: Iterable[Condition], condition: Condition) -> List[Condition]:
    """Return the conditions with ``condition`` appended if it is valid."""
    result = list(existing)
    if condition.is_valid():
        result.append(condition)
    return result


def _prefix(condition_type: Any) -> str:
    for kind, prefix in _PREFIXES.items():
        if condition_type == kind:
            return prefix
    raise QueryBuildError(f"unsupported condition type: {condition_type}")


def render_conditions(
    dialect: BaseDialect,
    conditions: Iterable[Condition],
    binder: Optional[ParamBinder] = None,
) -> Tuple[str, List[Any]]:
    """Render conditions to SQL, binding their values through ``binder``."""
    conditions = list(conditions)
    if not conditions:
        return "", []
    if binder is None:
        binder = ParamBinder(dialect)

    parts = []
    for condition in conditions:
        if not condition.is_valid():
            raise QueryBuildError(f"invalid condition: {condition.error}")
        placeholders = ", ".join(binder.bind_many(*condition.values))
        expr = f"{dialect.quote_identifier(condition.key)} {condition.operator} {placeholders}"
        parts.append(_prefix(condition.type) + expr)

    return " ".join(parts), list(binder.args)