"""Dialect-aware placeholder generation with the matching argument list."""

from __future__ import annotations

from typing import Any, List

from .dialect import BaseDialect


class ParamBinder:
    """Hands out placeholders for values and collects the values in order."""

    def __init__(self, dialect: BaseDialect, position: int = 1) -> None:
        self.dialect = dialect
        self.position = position
        self.args: List[Any] = []

    def bind(self, value: Any) -> str:
        """Record ``value`` and return its placeholder."""
        placeholder = self.dialect.placeholder(self.position)
        self.args.append(value)
        self.position += 1
        return placeholder

    def bind_many(self, *args: Any) -> List[str]:
        """Record each value in turn and return their placeholders."""
        return [self.bind(value) for value in args]