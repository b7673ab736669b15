# sqlfluent

Fluent builders for parameterised SQL statements. A builder collects the
parts of a statement through chained method calls. `build()` then returns a
tuple of the SQL text and the list of bound arguments. Identifier quoting and
placeholders follow the dialect the builder was given. With no dialect, the
generic one is used.

The package has no dependencies outside the standard library.

## Dialects

Every dialect is a `BaseDialect` (from `sqlfluent.dialect`). Each one comes
from a factory function in `sqlfluent.dialects`:

| Factory              | Identifier quoting | Placeholders | RETURNING | UPSERT |
|----------------------|--------------------|--------------|-----------|--------|
| `generic_dialect()`  | none               | `?`          | no        | no     |
| `postgres_dialect()` | `"id"`             | `$1, $2 …`   | yes       | yes    |
| `mysql_dialect()`    | `` `id` ``         | `?`          | no        | no     |
| `mssql_dialect()`    | `[id]`             | `?`          | no        | no     |
| `sqlite_dialect()`   | `"id"`             | `?`          | yes       | yes    |
| `oracle_dialect()`   | `"id"`             | `:name`      | yes       | yes    |
| `db2_dialect()`      | `"id"`             | `:name`      | yes       | yes    |
| `firebird_dialect()` | `"id"`             | `?`          | yes       | yes    |
| `informix_dialect()` | `"id"`             | `?`          | yes       | no     |

For the `:name` dialects, `placeholder(index)` gives `?`. Only
`placeholder_named(name)` gives `:name`.

`resolve_dialect(name)` picks a dialect by name. It accepts `"postgres"`,
`"postgresql"`, `"mysql"`, `"mariadb"`, `"mssql"` and `"sqlserver"`. Case and
surrounding spaces are ignored. Any other name gives the generic dialect.

You can also describe a dialect yourself:

```python
from sqlfluent.dialect import BaseDialect
from sqlfluent.styling import PlaceholderStyle, QuoteStyle

dialect = BaseDialect(
    name="custom",
    quote_style=QuoteStyle.DOUBLE,
    placeholder_style=PlaceholderStyle.DOLLAR,
    enable_returning=True,
)
dialect.validate()  # raises ValueError if the name, placeholder or quote style is missing
```

`BaseDialect` also has these methods:

- `build_limit_offset(limit, offset)`: a negative value leaves that part out.
- `render_from(table, alias)`: the alias is added only when `enable_aliasing` is set.
- `quote_literal(value)`: gives a literal for logs only.

## Inserting rows

```python
from sqlfluent.dialects import postgres_dialect
from sqlfluent.insert import InsertBuilder

sql, args = (
    InsertBuilder(postgres_dialect())
    .into("users")
    .columns("id", "name")
    .values(1, "Watson")
    .returning("id", "created_at")
    .build()
)
# sql  == 'INSERT INTO "users" ("id", "name") VALUES ($1, $2) RETURNING "id", "created_at"'
# args == [1, "Watson"]
```

Each call to `values(...)` adds one row. Columns may not carry an alias, so
`"email AS contact"` is rejected. `build()` adds RETURNING only when
`returning(...)` was called, and fails if the dialect does not support it.
`build_insert_only()` always leaves RETURNING out.

## Updating and deleting

```python
from sqlfluent.delete import DeleteBuilder
from sqlfluent.dialects import generic_dialect
from sqlfluent.update import UpdateBuilder

sql, args = (
    UpdateBuilder(generic_dialect())
    .table("users")
    .set("status", "active")
    .where("id = 42")
    .build()
)
# sql  == "UPDATE users SET status = ? WHERE id = ?"
# args == ["active", 42]

sql, args = (
    DeleteBuilder(generic_dialect())
    .from_("users")
    .where("id", 100)
    .and_where("status = active")
    .limit(10)
    .build()
)
# sql  == "DELETE FROM users WHERE id = ? AND status = ? LIMIT 10"
# args == [100, "active"]
```

A condition can be written in either of two forms:

- A field name followed by its values, for example `where("id", 100)`.
- A whole inline expression, for example `where("amount > 100")`. The literal
  is taken out and bound as an argument. Integers, floats and `true`/`false`
  are converted; anything else stays a string.

The operators understood are `=`, `!=`, `<>`, `>`, `<`, `>=`, `<=`, `LIKE`,
`IN`, `NOT IN` and `BETWEEN`.

`where` replaces any earlier conditions. `and_where` and `or_where` add to
them. `UpdateBuilder.use_dialect(name)` switches the dialect by name. The
placeholder numbers in WHERE carry on after those used by SET.

## Upserts

```python
from sqlfluent.dialects import postgres_dialect
from sqlfluent.upsert import Assignment, UpsertBuilder

sql, args = (
    UpsertBuilder(postgres_dialect())
    .into("users")
    .columns("id", "email")
    .values(1, "someone@example.com")
    .on_conflict("id")
    .do_update_set(Assignment(column="email", expr="EXCLUDED.email"))
    .build()
)
# INSERT INTO "users" ("id", "email") VALUES ($1, $2)
#   ON CONFLICT ("id") DO UPDATE SET "email" = EXCLUDED.email
```

If no assignments are given, the statement ends in `DO NOTHING`. The
expression in an `Assignment` is written into the SQL as it is.

## Errors

Problems are collected while you chain calls, grouped by the stage they belong
to. Examples are:

- an empty table name;
- an aliased insert column;
- a condition that cannot be parsed;
- a row whose length does not match the columns.

`build()` raises `QueryBuildError` from `sqlfluent.errors`. Validation failures
use its subclass `BuilderValidationError`. Its message lists every problem,
and its `stage_errors` attribute holds them as `StageError` entries:

```text
builder validation failed:
  - [FROM] requires a target table
```

Every builder has the methods `has_errors()`, `errors_by_stage()` and
`combine_errors()`. They let you look at the errors before building.

## Lower-level pieces

- `sqlfluent.condition` parses and builds `Condition` objects, for example
  `new_condition`, `condition_in` and `condition_between`.
- `sqlfluent.binder.ParamBinder` hands out placeholders and collects arguments.
- `sqlfluent.renderer.render_conditions` turns conditions into WHERE text.
- `sqlfluent.fields` has `FieldToken` and `Table`.
- `sqlfluent.styling` has the quote, placeholder and alias style enums.

## What it does not do

There is no SELECT builder. The package builds INSERT, UPDATE, DELETE and
upsert statements only. It only produces SQL text and arguments. It does not
connect to a database or run anything.