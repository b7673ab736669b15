"""Preconfigured dialects for common database engines and lookup by name."""

from __future__ import annotations

from .dialect import BaseDialect
from .styling import PlaceholderStyle, QuoteStyle


def db2_dialect() -> BaseDialect:
    """Return the IBM DB2 dialect: double quotes, named placeholders, RETURNING and UPSERT."""
    return BaseDialect(
        name="db2",
        quote_style=QuoteStyle.DOUBLE,
        placeholder_style=PlaceholderStyle.NAMED,
        enable_aliasing=True,
        enable_returning=True,
        enable_upsert=True,
    )


def firebird_dialect() -> BaseDialect:
    """Return the Firebird dialect: double quotes, ``?`` placeholders, RETURNING and UPSERT."""
    return BaseDialect(
        name="firebird",
        quote_style=QuoteStyle.DOUBLE,
        placeholder_style=PlaceholderStyle.QUESTION,
        enable_aliasing=True,
        enable_returning=True,
        enable_upsert=True,
    )


def generic_dialect() -> BaseDialect:
    """Return the neutral fallback dialect: no quoting, ``?`` placeholders, no extras."""
    return BaseDialect(
        name="generic",
        quote_style=QuoteStyle.NONE,
        placeholder_style=PlaceholderStyle.QUESTION,
        enable_aliasing=False,
        enable_returning=False,
        enable_upsert=False,
    )


def informix_dialect() -> BaseDialect:
    """Return the Informix dialect: double quotes, ``?`` placeholders, RETURNING only."""
    return BaseDialect(
        name="informix",
        quote_style=QuoteStyle.DOUBLE,
        placeholder_style=PlaceholderStyle.QUESTION,
        enable_aliasing=True,
        enable_returning=True,
        enable_upsert=False,
    )


def mssql_dialect() -> BaseDialect:
    """Return the SQL Server dialect: bracket quoting, ``?`` placeholders."""
    return BaseDialect(
        name="mssql",
        quote_style=QuoteStyle.BRACKET,
        placeholder_style=PlaceholderStyle.QUESTION,
        enable_aliasing=True,
        enable_returning=False,
        enable_upsert=False,
    )


def mysql_dialect() -> BaseDialect:
    """Return the MySQL dialect: backtick quoting, ``?`` placeholders."""
    return BaseDialect(
        name="mysql",
        quote_style=QuoteStyle.BACKTICK,
        placeholder_style=PlaceholderStyle.QUESTION,
        enable_aliasing=True,
        enable_returning=False,
        enable_upsert=False,
    )


def oracle_dialect() -> BaseDialect:
    """Return the Oracle dialect: double quotes, named placeholders, RETURNING and UPSERT."""
    return BaseDialect(
        name="Oracle",
        quote_style=QuoteStyle.DOUBLE,
        placeholder_style=PlaceholderStyle.NAMED,
        enable_aliasing=True,
        enable_returning=True,
        enable_upsert=True,
    )


def postgres_dialect() -> BaseDialect:
    """Return the PostgreSQL dialect: double quotes, ``$n`` placeholders, RETURNING and UPSERT."""
    return BaseDialect(
        name="postgres",
        quote_style=QuoteStyle.DOUBLE,
        placeholder_style=PlaceholderStyle.DOLLAR,
        enable_aliasing=True,
        enable_returning=True,
        enable_upsert=True,
    )


def sqlite_dialect() -> BaseDialect:
    """Return the SQLite dialect: double quotes, ``?`` placeholders, RETURNING and UPSERT."""
    return BaseDialect(
        name="SQLite",
        quote_style=QuoteStyle.DOUBLE,
        placeholder_style=PlaceholderStyle.QUESTION,
        enable_aliasing=True,
        enable_returning=True,
        enable_upsert=True,
    )


_BY_NAME = {
    "postgres": postgres_dialect,
    "postgresql": postgres_dialect,
    "mysql": mysql_dialect,
    "mariadb": mysql_dialect,
    "mssql": mssql_dialect,
    "sqlserver": mssql_dialect,
}


def resolve_dialect(name: str) -> BaseDialect:
    """Return a fresh dialect for ``name``; unknown names give the generic dialect."""
    factory = _BY_NAME.get(name.strip().lower(), generic_dialect)
    return factory()