import pytest

from sqlfluent.dialect import BaseDialect
from sqlfluent.dialects import (
    db2_dialect,
    firebird_dialect,
    generic_dialect,
    informix_dialect,
    mssql_dialect,
    mysql_dialect,
    oracle_dialect,
    postgres_dialect,
    resolve_dialect,
    sqlite_dialect,
)
from sqlfluent.styling import PlaceholderStyle, QuoteStyle


def test_generic():
    d = generic_dialect()
    assert d.placeholder(1) == "?"
    assert d.quote_identifier("id") == "id"
    assert d.supports_upsert() is False
    assert d.supports_returning() is False


def test_db2():
    d = db2_dialect()
    assert d.placeholder_named("id") == ":id"
    assert d.quote_identifier("id") == '"id"'
    assert d.supports_returning() is True
    assert d.supports_upsert() is True


def test_firebird():
    d = firebird_dialect()
    assert d.placeholder(1) == "?"
    assert d.quote_identifier("id") == '"id"'
    assert d.supports_returning() is True
    assert d.supports_upsert() is True


def test_informix():
    d = informix_dialect()
    assert d.placeholder(1) == "?"
    assert d.quote_identifier("id") == '"id"'
    assert d.supports_returning() is True
    assert d.supports_upsert() is False


def test_mssql():
    d = mssql_dialect()
    assert d.placeholder(1) == "?"
    assert d.quote_identifier("id") == "[id]"
    assert d.supports_returning() is False
    assert d.supports_upsert() is False


def test_mysql():
    d = mysql_dialect()
    assert d.placeholder(1) == "?"
    assert d.quote_identifier("id") == "`id`"
    assert d.supports_returning() is False
    assert d.supports_upsert() is False


def test_oracle():
    d = oracle_dialect()
    assert d.placeholder_named("id") == ":id"
    assert d.quote_identifier("id") == '"id"'
    assert d.supports_upsert() is True
    assert d.supports_returning() is True


def test_postgres():
    d = postgres_dialect()
    assert d.placeholder(1) == "$1"
    assert d.quote_identifier("id") == '"id"'
    assert d.supports_upsert() is True
    assert d.supports_returning() is True


def test_sqlite():
    d = sqlite_dialect()
    assert d.placeholder(1) == "?"
    assert d.quote_identifier("id") == '"id"'
    assert d.supports_upsert() is True
    assert d.supports_returning() is True


def test_resolve_dialect_basic():
    assert resolve_dialect("postgres").dialect_name() == "postgres"
    assert resolve_dialect("unknown").dialect_name() == "generic"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("mysql", "mysql"),
        ("mariadb", "mysql"),
        ("mssql", "mssql"),
        ("sqlserver", "mssql"),
        ("postgresql", "postgres"),
        ("  PostgreS ", "postgres"),
        ("unknown_db", "generic"),
    ],
)
def test_resolve_dialect_names(name, expected):
    assert resolve_dialect(name).dialect_name() == expected


def test_resolve_unknown_fallback_is_valid():
    d = resolve_dialect("unknown_db")
    assert d.dialect_name() == "generic"
    assert d.validate() is None


def test_resolve_returns_fresh_instances():
    first = resolve_dialect("postgres")
    second = resolve_dialect("postgres")
    first.next_placeholder()
    assert second.next_placeholder() == "$1"


def test_base_dialect_direct_methods():
    base = BaseDialect()
    assert base.build_limit_offset(10, 20) == "LIMIT 10 OFFSET 20"
    assert base.build_limit_offset(5, -1) == "LIMIT 5"
    assert base.build_limit_offset(-1, 20) == "OFFSET 20"
    assert base.build_limit_offset(-1, -1) == ""
    assert base.quote_literal("value") == "'value'"
    assert base.quote_literal(42) == "42"
    assert base.quote_literal(True) == "true"
    assert base.quote_literal([1, 2, 3]) == "'[1 2 3]'"


@pytest.mark.parametrize(
    "dialect, expected",
    [
        (BaseDialect(), "base"),
        (generic_dialect(), "generic"),
        (postgres_dialect(), "postgres"),
        (mssql_dialect(), "mssql"),
        (mysql_dialect(), "mysql"),
    ],
)
def test_dialect_name(dialect, expected):
    assert dialect.dialect_name() == expected


@pytest.mark.parametrize(
    "dialect, expected",
    [
        (BaseDialect(), "user"),
        (generic_dialect(), "user"),
        (postgres_dialect(), '"user"'),
        (mssql_dialect(), "[user]"),
        (mysql_dialect(), "`user`"),
    ],
)
def test_quote_identifier(dialect, expected):
    assert dialect.quote_identifier("user") == expected


@pytest.mark.parametrize(
    "dialect, expected",
    [
        (generic_dialect(), QuoteStyle.NONE),
        (postgres_dialect(), QuoteStyle.DOUBLE),
        (mssql_dialect(), QuoteStyle.BRACKET),
        (mysql_dialect(), QuoteStyle.BACKTICK),
    ],
)
def test_quote_style(dialect, expected):
    assert dialect.quote_style == expected


@pytest.mark.parametrize(
    "dialect, first, other",
    [
        (BaseDialect(), "?", "?"),
        (generic_dialect(), "?", "?"),
        (postgres_dialect(), "$1", "$5"),
        (mssql_dialect(), "?", "?"),
        (mysql_dialect(), "?", "?"),
    ],
)
def test_placeholder(dialect, first, other):
    index = 5 if dialect.placeholder_style is PlaceholderStyle.DOLLAR else 99
    assert dialect.placeholder(1) == first
    assert dialect.placeholder(index) == other


@pytest.mark.parametrize(
    "dialect, plain, aliased",
    [
        (BaseDialect(), "users", "users"),
        (generic_dialect(), "users", "users"),
        (postgres_dialect(), '"users"', '"users" u'),
        (mssql_dialect(), "[users]", "[users] u"),
        (mysql_dialect(), "`users`", "`users` u"),
    ],
)
def test_render_from(dialect, plain, aliased):
    assert dialect.render_from("users", "") == plain
    assert dialect.render_from("users", "u") == aliased


@pytest.mark.parametrize(
    "dialect, returning, upsert",
    [
        (BaseDialect(), False, False),
        (generic_dialect(), False, False),
        (postgres_dialect(), True, True),
        (mssql_dialect(), False, False),
        (mysql_dialect(), False, False),
    ],
)
def test_capabilities(dialect, returning, upsert):
    assert dialect.supports_returning() is returning
    assert dialect.supports_upsert() is upsert


def test_validate_valid():
    d = BaseDialect(
        name="test",
        quote_style=QuoteStyle.NONE,
        placeholder_style=PlaceholderStyle.QUESTION,
    )
    assert d.validate() is None
    assert d.placeholder(0) == "?"


def test_validate_missing_name():
    with pytest.raises(ValueError, match="dialect is not configured"):
        BaseDialect(name="").validate()


@pytest.mark.parametrize(
    "factory",
    [
        db2_dialect,
        firebird_dialect,
        generic_dialect,
        informix_dialect,
        mssql_dialect,
        mysql_dialect,
        oracle_dialect,
        postgres_dialect,
        sqlite_dialect,
    ],
)
def test_every_predefined_dialect_validates(factory):
    d = factory()
    assert d.validate() is None
    assert d.placeholder_style.is_valid()