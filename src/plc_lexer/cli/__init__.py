"""
PLC Lexer Command-Line Interface
================================

This package provides command-line tools for the lexer:

- **plclex**: tokenize a source file and print its tokens
- **plcregex**: test input lines against a named classification pattern

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["plclex", "plcregex"]
