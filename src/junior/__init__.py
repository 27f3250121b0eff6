"""
Junior - a minimal S-expression calculator.

This module provides:
- Lexer: Tokenizes source text
- Parser: Builds a tagged parse tree from tokens
- Runtime: Reads parse trees into values and evaluates them
- Printer: Formats values for display

Usage:
    from junior import parse_source, read, evaluate, format_value

    tree = parse_source('+ 1 (* 2 3)')
    result = evaluate(read(tree))
    print(format_value(result))     # 7

    # Or in one step
    from junior import evaluate_source
    evaluate_source('/ 10 0')       # Error(DIV_ZERO, 'division by zero')
"""

__version__ = "0.0.1"

from .tokens import (
    Token,
    TokenType,
    SourceLocation,
    SourceSpan,
)

from .lexer import (
    Lexer,
    tokenize,
)

from .parser import (
    Parser,
    parse,
    parse_source,
)

from .ast import (
    ParseNode,
    format_ast,
    print_ast,
)

from .errors import (
    JuniorError,
    LexerError,
    ParserError,
    Diagnostic,
    ErrorSeverity,
)

from .runtime import (
    Value,
    Number,
    Error,
    Symbol,
    Expression,
    ErrorKind,
    make_number,
    make_error,
    make_symbol,
    make_expression,
    read,
    BuiltinRegistry,
    get_builtin_registry,
    apply,
    Evaluator,
    evaluate,
    evaluate_source,
)

from .printer import (
    format_value,
    print_value,
)

__all__ = [
    # Tokens
    'Token',
    'TokenType',
    'SourceLocation',
    'SourceSpan',

    # Lexer
    'Lexer',
    'tokenize',

    # Parser
    'Parser',
    'parse',
    'parse_source',
    'ParseNode',
    'format_ast',
    'print_ast',

    # Errors
    'JuniorError',
    'LexerError',
    'ParserError',
    'Diagnostic',
    'ErrorSeverity',

    # Runtime
    'Value',
    'Number',
    'Error',
    'Symbol',
    'Expression',
    'ErrorKind',
    'make_number',
    'make_error',
    'make_symbol',
    'make_expression',
    'read',
    'BuiltinRegistry',
    'get_builtin_registry',
    'apply',
    'Evaluator',
    'evaluate',
    'evaluate_source',

    # Printer
    'format_value',
    'print_value',
]
