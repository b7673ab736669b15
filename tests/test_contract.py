from typing import Optional

import pytest

from sqlfluent.contract import Errorable, Kind, Kindable, Quoter, Renderable
from sqlfluent.dialects import postgres_dialect


@pytest.mark.parametrize(
    "kind, text",
    [
        (Kind.UNKNOWN, "Unknown"),
        (Kind.COLUMN, "Column"),
        (Kind.TABLE, "Table"),
        (Kind.CONDITION, "Condition"),
    ],
)
def test_kind_str(kind, text):
    assert str(kind) == text


def test_kind_values():
    assert [int(k) for k in Kind] == [0, 1, 2, 3]
    assert Kind(1) is Kind.COLUMN


def test_kind_unknown_value_rejected():
    with pytest.raises(ValueError):
        Kind(99)


def test_dialect_is_quoter():
    quoter = postgres_dialect()
    assert isinstance(quoter, Quoter)
    assert not isinstance(object(), Quoter)
    assert quoter.quote_identifier("user") == '"user"'


class _Token:
    def __init__(self) -> None:
        self.error: Optional[Exception] = None
        self.kind = Kind.COLUMN

    def is_errored(self) -> bool:
        return self.error is not None

    def set_error(self, source: str, err: Exception) -> None:
        self.error = err

    def render_name(self, quoter):
        return quoter.quote_identifier("id") if quoter else "id"

    def render_alias(self, quoter, qualified):
        return qualified


def test_structural_protocols():
    token = _Token()
    assert isinstance(token, Errorable)
    assert isinstance(token, Kindable)
    assert isinstance(token, Renderable)
    assert token.render_name(postgres_dialect()) == '"id"'
    assert not isinstance(object(), Errorable)