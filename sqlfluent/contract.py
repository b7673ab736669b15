"""Token classification and the structural interfaces tokens may provide."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Protocol, runtime_checkable


class Kind(IntEnum):
    """The classification of a token."""

    UNKNOWN = 0
    COLUMN = 1
    TABLE = 2
    CONDITION = 3

    def __str__(self) -> str:
        return _KIND_NAMES[self]


_KIND_NAMES = {
    Kind.UNKNOWN: "Unknown",
    Kind.COLUMN: "Column",
    Kind.TABLE: "Table",
    Kind.CONDITION: "Condition",
}


@runtime_checkable
class Errorable(Protocol):
    """Something that can carry an error state."""

    error: Optional[Exception]

    def is_errored(self) -> bool:
        """Return True if an error has been recorded."""
        ...

    def set_error(self, source: str, err: Exception) -> None:
        """Record ``err`` for the input ``source``, replacing any earlier error."""
        ...


@runtime_checkable
class Kindable(Protocol):
    """Something classified by a :class:`Kind`."""

    kind: Kind


@runtime_checkable
class Quoter(Protocol):
    """Something that quotes SQL identifiers for a dialect."""

    def quote_identifier(self, name: str) -> str:
        """Return ``name`` quoted for the dialect."""
        ...


@runtime_checkable
class Renderable(Protocol):
    """A token that can render its name and alias and describe itself."""

    def render_name(self, quoter: Optional[Quoter]) -> str:
        """Return the alias or name, quoted when a quoter is given."""
        ...

    def render_alias(self, quoter: Optional[Quoter], qualified: str) -> str:
        """Return ``qualified`` followed by ``AS alias`` when the token is aliased."""
        ...

    def __str__(self) -> str:
        ...