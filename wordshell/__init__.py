"""A small command shell, its line parser and the word scanners it reads commands with."""

__version__ = "0.1.0"
__all__ = ["lexer", "simple", "quoting", "cli", "parser", "shell"]