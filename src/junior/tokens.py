"""
Token types for the Junior lexer.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Optional


class TokenType(Enum):
    """All token types recognized by the lexer."""

    # --- Literals ---
    NUMBER = auto()             # 42, -7

    # --- Symbols ---
    SYMBOL = auto()             # + - * / % or a name like foo

    # --- Delimiters ---
    LPAREN = auto()             # (
    RPAREN = auto()             # )

    # --- Special ---
    EOF = auto()                # end of input


@dataclass(frozen=True)
class SourceLocation:
    """Represents a position in source code."""
    line: int           # 1-indexed line number
    column: int         # 1-indexed column number
    offset: int         # 0-indexed character offset from start
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a range in source code."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"


@dataclass(frozen=True)
class Token:
    """A single token from the lexer."""
    type: TokenType
    value: Any              # Token text for NUMBER and SYMBOL, else the delimiter
    lexeme: str             # The original source text
    span: SourceSpan        # Location in source

    def __str__(self) -> str:
        if self.type in (TokenType.NUMBER, TokenType.SYMBOL):
            return f"{self.type.name}({self.value!r})"
        return self.type.name


# Single-character operator symbols
OPERATOR_CHARS: frozenset = frozenset("+-*/%")

# Characters that delimit tokens without being part of them
DELIMITERS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


def is_name_start(ch: str) -> bool:
    """Check if a character can start a named symbol."""
    return ch.isascii() and (ch.isalpha() or ch == '_')


def is_name_char(ch: str) -> bool:
    """Check if a character can continue a named symbol."""
    return ch.isascii() and (ch.isalnum() or ch == '_')
