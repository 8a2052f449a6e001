[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datalogue"
version = "0.1.0"
description = "A small Datalog toolkit: scanner, parser, relational algebra and rule interpreter, plus a book-list reporter"
requires-python = ">=3.10"
dependencies = []
keywords = ["datalog", "interpreter", "parser", "scanner", "relational-algebra"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datalogue = "datalogue.cli:main"
datalogue-tokens = "datalogue.cli:tokens_main"
datalogue-parse = "datalogue.cli:parse_main"
datalogue-books = "datalogue.books.library:main"

[tool.hatch.build.targets.wheel]
packages = ["datalogue"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
