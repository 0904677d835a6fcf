"""Lexer for a small scripting language, with a command that prints token streams."""

__version__ = "0.1.0"
__all__ = ["__version__"]