"""A minimal interpreter for a small Python-like language, with an interactive prompt."""

__version__ = "0.1.0"
__all__ = ["environment", "lexer", "nodes", "parser", "repl", "value"]