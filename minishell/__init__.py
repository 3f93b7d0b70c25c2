"""A small interactive shell front end: lexer, parser and read loop."""

__version__ = "0.1.0"
__all__ = ["chars", "textutils", "tokenizer", "lexer", "parser", "shell"]