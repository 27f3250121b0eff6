"""
Lexer for Junior expressions.

Converts source text into a stream of tokens for the parser.
Supports:
- Integer literals with an optional leading minus sign (-?[0-9]+)
- Operator symbols (+ - * / %)
- Named symbols ([a-zA-Z_][a-zA-Z0-9_]*)
- Parentheses
"""

from typing import List, Optional, Iterator
from .tokens import (
    Token, TokenType, SourceLocation, SourceSpan,
    OPERATOR_CHARS, DELIMITERS, is_name_start, is_name_char,
)
from .errors import error_unexpected_character


class Lexer:
    """
    Tokenizer for Junior source text.

    Usage:
        lexer = Lexer(source_code)
        tokens = lexer.tokenize()

    Or for streaming:
        lexer = Lexer(source_code)
        for token in lexer:
            process(token)
    """

    def __init__(self, source: str, filename: Optional[str] = None):
        self.source = source
        self.filename = filename
        self.pos = 0            # Current position in source
        self.line = 1           # Current line (1-indexed)
        self.column = 1         # Current column (1-indexed)
        self._lines: Optional[List[str]] = None  # Cached line list

    @property
    def lines(self) -> List[str]:
        """Lazy-load line list for error reporting."""
        if self._lines is None:
            self._lines = self.source.splitlines()
        return self._lines

    def get_source_line(self, line_num: int) -> Optional[str]:
        """Get a specific line of source (1-indexed)."""
        if 1 <= line_num <= len(self.lines):
            return self.lines[line_num - 1]
        return None

    def _location(self) -> SourceLocation:
        """Get current source location."""
        return SourceLocation(self.line, self.column, self.pos, self.filename)

    def _span(self, start: SourceLocation) -> SourceSpan:
        """Create a span from start to current position."""
        return SourceSpan(start, self._location())

    def _peek(self, offset: int = 0) -> str:
        """Look at character at current position + offset without consuming."""
        idx = self.pos + offset
        if idx >= len(self.source):
            return '\0'
        return self.source[idx]

    def _advance(self) -> str:
        """Consume and return current character."""
        if self.pos >= len(self.source):
            return '\0'
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _is_at_end(self) -> bool:
        """Check if we've reached end of source."""
        return self.pos >= len(self.source)

    def _skip_whitespace(self) -> None:
        while not self._is_at_end() and self._peek() in ' \t\r\n':
            self._advance()

    def _make_token(self, token_type: TokenType, value, start: SourceLocation,
                    lexeme: Optional[str] = None) -> Token:
        """Create a token."""
        span = self._span(start)
        if lexeme is None:
            lexeme = self.source[start.offset:self.pos]
        return Token(token_type, value, lexeme, span)

    def _scan_number(self) -> Token:
        """Scan an integer literal, including a leading minus sign.

        The text is kept as-is; range checking is left to the reader so
        that an oversized literal becomes an error value instead of a
        syntax error.
        """
        start = self._location()
        if self._peek() == '-':
            self._advance()
        while self._peek().isascii() and self._peek().isdigit():
            self._advance()
        lexeme = self.source[start.offset:self.pos]
        return self._make_token(TokenType.NUMBER, lexeme, start)

    def _scan_name(self) -> Token:
        """Scan a named symbol."""
        start = self._location()
        while is_name_char(self._peek()):
            self._advance()
        lexeme = self.source[start.offset:self.pos]
        return self._make_token(TokenType.SYMBOL, lexeme, start)

    def _scan_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()

        start = self._location()
        if self._is_at_end():
            return self._make_token(TokenType.EOF, None, start, "")

        ch = self._peek()

        # A minus directly followed by a digit is a negative literal
        if ch.isascii() and ch.isdigit():
            return self._scan_number()
        if ch == '-' and self._peek(1).isascii() and self._peek(1).isdigit():
            return self._scan_number()

        if ch in DELIMITERS:
            self._advance()
            return self._make_token(DELIMITERS[ch], ch, start)

        if ch in OPERATOR_CHARS:
            self._advance()
            return self._make_token(TokenType.SYMBOL, ch, start)

        if is_name_start(ch):
            return self._scan_name()

        raise error_unexpected_character(
            ch, self._span(start), self.get_source_line(start.line)
        )

    def tokenize(self) -> List[Token]:
        """Tokenize the entire source, returning a list of tokens."""
        tokens = []
        while True:
            token = self._scan_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens

    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens."""
        while True:
            token = self._scan_token()
            yield token
            if token.type == TokenType.EOF:
                break


def tokenize(source: str, filename: Optional[str] = None) -> List[Token]:
    """
    Convenience function to tokenize source code.

    Args:
        source: The source code to tokenize
        filename: Optional filename for error messages

    Returns:
        List of tokens

    Raises:
        LexerError: If tokenization fails
    """
    lexer = Lexer(source, filename)
    return lexer.tokenize()
