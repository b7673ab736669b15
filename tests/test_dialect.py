import pytest

from sqlfluent.dialect import BaseDialect
from sqlfluent.styling import PlaceholderStyle, QuoteStyle


def test_basic_usage():
    d = BaseDialect(
        name="test",
        quote_style=QuoteStyle.DOUBLE,
        placeholder_style=PlaceholderStyle.DOLLAR,
        enable_returning=True,
        enable_upsert=True,
    )
    assert d.dialect_name() == "test"
    assert d.quote_identifier("field") == '"field"'
    assert d.placeholder(1) == "$1"
    assert d.supports_returning() is True
    assert d.supports_upsert() is True
    assert d.validate() is None


def test_default_name_is_base():
    assert BaseDialect().dialect_name() == "base"


def test_validate_empty_name():
    d = BaseDialect(quote_style=QuoteStyle.DOUBLE, placeholder_style=PlaceholderStyle.QUESTION)
    with pytest.raises(ValueError, match="dialect is not configured"):
        d.validate()


def test_validate_whitespace_name():
    d = BaseDialect(name="   ", quote_style=QuoteStyle.DOUBLE, placeholder_style=PlaceholderStyle.QUESTION)
    with pytest.raises(ValueError, match="dialect is not configured"):
        d.validate()


def test_validate_placeholder_unset():
    d = BaseDialect(name="test", quote_style=QuoteStyle.DOUBLE)
    with pytest.raises(ValueError, match="placeholder style is not configured"):
        d.validate()


def test_validate_quote_none_is_valid():
    d = BaseDialect(name="test", quote_style=QuoteStyle.NONE, placeholder_style=PlaceholderStyle.QUESTION)
    assert d.validate() is None
    assert d.placeholder(0) == "?"


def test_validate_quote_unset():
    d = BaseDialect(name="test", placeholder_style=PlaceholderStyle.QUESTION)
    with pytest.raises(ValueError, match="quote style is not configured"):
        d.validate()


def test_build_limit_offset():
    base = BaseDialect()
    assert base.build_limit_offset(10, 20) == "LIMIT 10 OFFSET 20"
    assert base.build_limit_offset(5, -1) == "LIMIT 5"
    assert base.build_limit_offset(-1, 20) == "OFFSET 20"
    assert base.build_limit_offset(-1, -1) == ""


def test_quote_literal():
    base = BaseDialect()
    assert base.quote_literal("value") == "'value'"
    assert base.quote_literal(42) == "42"
    assert base.quote_literal(True) == "true"
    assert base.quote_literal(False) == "false"
    assert base.quote_literal([1, 2, 3]) == "'[1 2 3]'"


def test_base_quote_and_placeholder_defaults():
    base = BaseDialect()
    assert base.quote_identifier("user") == "user"
    assert base.placeholder(1) == "?"
    assert base.placeholder(99) == "?"
    assert base.supports_returning() is False
    assert base.supports_upsert() is False


def test_render_from_without_aliasing():
    base = BaseDialect()
    assert base.render_from("users", "") == "users"
    assert base.render_from("users", "u") == "users"


def test_render_from_with_aliasing():
    d = BaseDialect(name="x", quote_style=QuoteStyle.BRACKET, enable_aliasing=True)
    assert d.render_from("users", "") == "[users]"
    assert d.render_from("users", "u") == "[users] u"


def test_placeholder_named():
    d = BaseDialect(placeholder_style=PlaceholderStyle.NAMED)
    assert d.placeholder_named("id") == ":id"
    assert BaseDialect(placeholder_style=PlaceholderStyle.DOLLAR).placeholder_named("id") == "?"


def test_next_placeholder_and_reset():
    d = BaseDialect(placeholder_style=PlaceholderStyle.DOLLAR)
    assert d.next_placeholder() == "$1"
    assert d.next_placeholder() == "$2"
    d.reset_placeholders()
    assert d.next_placeholder() == "$1"