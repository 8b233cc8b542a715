[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minipy"
version = "0.1.0"
description = "A minimal interpreter for a small Python-like language, with an interactive prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "repl", "lexer", "parser", "ast"]
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
minipy = "minipy.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["minipy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
