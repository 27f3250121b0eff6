"""
Display formatting for runtime values.
"""

import sys
from typing import TextIO

from .runtime.values import Value, Number, Error, Symbol, Expression


def format_value(value: Value) -> str:
    """Render a value the way the REPL prints it."""
    if isinstance(value, Number):
        return str(value.value)
    if isinstance(value, Error):
        return f"Error: {value.message}"
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, Expression):
        return "(" + " ".join(format_value(child) for child in value.children) + ")"
    raise TypeError(f"cannot format {type(value).__name__}")


def print_value(value: Value, file: TextIO = None) -> None:
    """Print a value followed by a newline."""
    print(format_value(value), file=file or sys.stdout)
