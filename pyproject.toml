[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "onelex"
version = "0.1.0"
description = "Lexer for a small scripting language, with a command that prints the token stream of source files"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "scanner", "interpreter", "language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
onelex = "onelex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["onelex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
