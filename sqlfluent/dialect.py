"""The configurable SQL dialect that every concrete dialect is built from."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .styling import PlaceholderStyle, QuoteStyle


def _display(value: Any) -> str:
    """Render a value the way diagnostic output shows it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_display(item) for item in value) + "]"
    return str(value)


@dataclass
class BaseDialect:
    """A SQL dialect described by its name, quoting, placeholders and capabilities."""

    name: str = ""
    quote_style: QuoteStyle = QuoteStyle.UNSET
    placeholder_style: PlaceholderStyle = PlaceholderStyle.UNSET
    enable_aliasing: bool = False
    enable_returning: bool = False
    enable_upsert: bool = False
    _counter: int = field(default=0, init=False, repr=False, compare=False)

    def dialect_name(self) -> str:
        """Return the dialect name, or ``base`` when none is set."""
        return self.name or "base"

    def next_placeholder(self) -> str:
        """Advance the internal counter and return the matching placeholder."""
        self._counter += 1
        return self.placeholder(self._counter)

    def quote_identifier(self, identifier: str) -> str:
        """Quote ``identifier`` with the configured quote style."""
        return self.quote_style.quote(identifier)

    def quote_literal(self, value: Any) -> str:
        """Return a printable literal for logs and diagnostics, never for execution."""
        if isinstance(value, str):
            return f"'{value}'"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return f"'{_display(value)}'"

    def placeholder(self, index: int) -> str:
        """Return the positional placeholder for ``index``."""
        return self.placeholder_style.format(index)

    def placeholder_named(self, name: str) -> str:
        """Return the named placeholder for ``name``."""
        return self.placeholder_style.format_named(name)

    def build_limit_offset(self, limit: int, offset: int) -> str:
        """Return the LIMIT/OFFSET clause; negative values leave a part out."""
        if limit >= 0 and offset >= 0:
            return f"LIMIT {limit} OFFSET {offset}"
        if limit >= 0:
            return f"LIMIT {limit}"
        if offset >= 0:
            return f"OFFSET {offset}"
        return ""

    def render_from(self, table: str, alias: str) -> str:
        """Return a FROM reference: the quoted table, plus the alias if aliasing is on."""
        quoted = self.quote_identifier(table)
        if alias and self.enable_aliasing:
            return f"{quoted} {alias}"
        return quoted

    def reset_placeholders(self) -> None:
        """Reset the sequential placeholder counter."""
        self._counter = 0

    def supports_returning(self) -> bool:
        """Return True if the dialect supports RETURNING clauses."""
        return self.enable_returning

    def supports_upsert(self) -> bool:
        """Return True if the dialect supports native UPSERT syntax."""
        return self.enable_upsert

    def validate(self) -> None:
        """Raise ValueError if the dialect is not fully configured."""
        if not self.name.strip():
            raise ValueError("BaseDialect: dialect is not configured")
        if not self.placeholder_style.is_valid():
            raise ValueError("BaseDialect: placeholder style is not configured")
        if not self.quote_style.is_valid():
            raise ValueError("BaseDialect: quote style is not configured")