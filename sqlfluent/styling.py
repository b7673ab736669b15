"""Rendering styles for identifiers, aliases and parameter placeholders."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class IdentifierQuoter(Protocol):
    """Anything that can quote an SQL identifier for a given dialect."""

    def quote_identifier(self, name: str) -> str:
        """Return ``name`` quoted according to the dialect's rules."""
        ...


class AliasStyle(IntEnum):
    """How an alias is attached to a table or column reference."""

    NONE = 0
    WITHOUT_KEYWORD = 1
    WITH_KEYWORD = 2

    def format(self, base: str, alias: str) -> str:
        """Render ``base`` with ``alias`` according to this style, unquoted."""
        if not alias or self is AliasStyle.NONE:
            return base
        if self is AliasStyle.WITH_KEYWORD:
            return f"{base} AS {alias}"
        if self is AliasStyle.WITHOUT_KEYWORD:
            return f"{base} {alias}"
        return base

    def format_with(self, quoter: Optional[IdentifierQuoter], base: str, alias: str) -> str:
        """Render ``base`` with ``alias``, quoting both through ``quoter`` when given."""

        def quote(identifier: str) -> str:
            return quoter.quote_identifier(identifier) if quoter is not None else identifier

        if not alias or self is AliasStyle.NONE:
            return quote(base)
        if self is AliasStyle.WITH_KEYWORD:
            return f"{quote(base)} AS {quote(alias)}"
        if self is AliasStyle.WITHOUT_KEYWORD:
            return f"{quote(base)} {quote(alias)}"
        return quote(base)

    def is_valid(self) -> bool:
        """Return True if this is a recognised alias rendering option."""
        return AliasStyle.NONE <= self <= AliasStyle.WITH_KEYWORD


class PlaceholderStyle(IntEnum):
    """How bound parameters are written in a parameterised query."""

    UNSET = 0
    QUESTION = 1
    DOLLAR = 2
    NAMED = 3
    AT = 4

    def format(self, index: int) -> str:
        """Return the positional placeholder for ``index``."""
        if self is PlaceholderStyle.DOLLAR:
            return f"${index}"
        return "?"

    def format_named(self, name: str) -> str:
        """Return the named placeholder for ``name``; positional styles give ``?``."""
        if self is PlaceholderStyle.NAMED:
            return f":{name}"
        if self is PlaceholderStyle.AT:
            return f"@{name}"
        return "?"

    def is_valid(self) -> bool:
        """Return True unless the style is unset."""
        return PlaceholderStyle.UNSET < self <= PlaceholderStyle.AT


class QuoteStyle(IntEnum):
    """How identifiers such as table and column names are quoted."""

    UNSET = 0
    DOUBLE = 1
    BACKTICK = 2
    BRACKET = 3
    NONE = 4

    def is_valid(self) -> bool:
        """Return True unless the style is unset."""
        return QuoteStyle.UNSET < self <= QuoteStyle.NONE

    def quote(self, identifier: str) -> str:
        """Return ``identifier`` wrapped in this style's quote characters."""
        if self is QuoteStyle.DOUBLE:
            return f'"{identifier}"'
        if self is QuoteStyle.BACKTICK:
            return f"`{identifier}`"
        if self is QuoteStyle.BRACKET:
            return f"[{identifier}]"
        return identifier