[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monke"
version = "0.1.0"
description = "Lexer, Pratt parser and interactive parse-and-print loop for the Monke programming language"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "lexer", "pratt-parser", "repl", "monkey-language"]
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
monke = "monke.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["monke"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
