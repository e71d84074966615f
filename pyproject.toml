[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seaquery"
version = "0.20.0"
description = "Building blocks for composing SQL: a tokenizer, typed values and identifiers"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "sql", "mysql", "postgres", "sqlite", "tokenizer", "identifiers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seaquery"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
