[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlfluent"
version = "1.6.0"
description = "Fluent, dialect-aware builders for parameterised INSERT, UPDATE, DELETE and upsert statements."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sql",
    "query-builder",
    "fluent",
    "dialect",
    "postgres",
    "mysql",
    "sqlite",
    "mssql",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: SQL",
    "Topic :: Database :: Front-Ends",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sqlfluent"]

[tool.hatch.build.targets.sdist]
include = ["sqlfluent", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
