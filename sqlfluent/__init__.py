"""Fluent, dialect-aware builders for parameterised INSERT, UPDATE, DELETE and upsert SQL."""

__version__ = "1.6.0"