"""
Junior runtime - value model, reader and tree-walking evaluator.

This module provides:
- Values: Number, Error, Symbol and Expression, with ownership helpers
- Reader: Converts parse trees into values
- BuiltinRegistry: The arithmetic operators
- Evaluator: Reduces a value tree to a single value
"""

from .values import (
    Value,
    Number,
    Error,
    Symbol,
    Expression,
    ErrorKind,
    INT64_MIN,
    INT64_MAX,
    make_number,
    make_error,
    make_symbol,
    make_expression,
    append,
    remove_at,
    take_at,
    destroy,
    is_number,
    is_error,
    is_symbol,
    is_expression,
    fits_int64,
)

from .reader import (
    read,
    read_number,
)

from .builtins import (
    BuiltinOperator,
    BuiltinRegistry,
    get_builtin_registry,
    apply,
)

from .evaluator import (
    Evaluator,
    evaluate,
    evaluate_source,
)

__all__ = [
    # Values
    'Value',
    'Number',
    'Error',
    'Symbol',
    'Expression',
    'ErrorKind',
    'INT64_MIN',
    'INT64_MAX',
    'make_number',
    'make_error',
    'make_symbol',
    'make_expression',
    'append',
    'remove_at',
    'take_at',
    'destroy',
    'is_number',
    'is_error',
    'is_symbol',
    'is_expression',
    'fits_int64',

    # Reader
    'read',
    'read_number',

    # Builtins
    'BuiltinOperator',
    'BuiltinRegistry',
    'get_builtin_registry',
    'apply',

    # Evaluator
    'Evaluator',
    'evaluate',
    'evaluate_source',
]
