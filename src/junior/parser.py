"""
Recursive descent parser for Junior.

Converts a token stream into a tagged parse tree (see ``junior.ast``).

Grammar:
    number : /-?[0-9]+/ ;
    symbol : '+' | '-' | '*' | '/' | '%' | /[a-zA-Z_][a-zA-Z0-9_]*/ ;
    sexpr  : '(' <expr>* ')' ;
    expr   : <number> | <symbol> | <sexpr> ;
    junior : /^/ <expr>* /$/ ;
"""

from typing import List, Optional
from .tokens import Token, TokenType, SourceSpan, OPERATOR_CHARS
from .ast import (
    ParseNode,
    ROOT_TAG, ANCHOR_TAG, CHAR_TAG,
    NUMBER_TAG, OPERATOR_TAG, NAME_TAG, SEXPR_TAG,
)
from .errors import (
    error_unexpected_token,
    error_unexpected_eof,
    error_nesting_too_deep,
)


class Parser:
    """
    Recursive descent parser producing a tagged parse tree.

    Usage:
        parser = Parser(tokens)
        tree = parser.parse_program()
    """

    # Deepest parenthesis nesting accepted; reading and evaluation recurse once per level
    MAX_DEPTH = 200

    def __init__(self, tokens: List[Token], filename: Optional[str] = None, source: Optional[str] = None):
        self.tokens = tokens
        self.filename = filename
        self.source = source  # Original source for error messages
        self.pos = 0
        self.depth = 0

    # =========================================================================
    # Token Navigation
    # =========================================================================

    def _current(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[self.pos]

    def _is_at_end(self) -> bool:
        """Check if at end of tokens."""
        return self._current().type == TokenType.EOF

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token is of given type."""
        return self._current().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._current()
        if not self._is_at_end():
            self.pos += 1
        return token

    def _source_line(self, line: int) -> Optional[str]:
        if self.source is None:
            return None
        lines = self.source.splitlines()
        if 1 <= line <= len(lines):
            return lines[line - 1]
        return None

    def _error(self, expected: str) -> None:
        """Raise a parse error at the current token."""
        token = self._current()
        source_line = self._source_line(token.span.start.line)
        if token.type == TokenType.EOF:
            raise error_unexpected_eof(expected, token.span, source_line)
        raise error_unexpected_token(expected, f"'{token.lexeme}'", token.span, source_line)

    def _span_from(self, start: Token) -> SourceSpan:
        """Create span from start token to the previous token."""
        end = self.tokens[self.pos - 1] if self.pos > 0 else start
        return SourceSpan(start.span.start, end.span.end)

    def _anchor(self) -> ParseNode:
        token = self._current()
        return ParseNode(ANCHOR_TAG, "", [], SourceSpan(token.span.start, token.span.start))

    # =========================================================================
    # Expressions
    # =========================================================================

    def _parse_expr(self) -> ParseNode:
        """Parse a single expression: number, symbol or S-expression."""
        token = self._current()

        if token.type == TokenType.NUMBER:
            self._advance()
            return ParseNode(NUMBER_TAG, token.value, [], token.span)

        if token.type == TokenType.SYMBOL:
            self._advance()
            tag = OPERATOR_TAG if token.value in OPERATOR_CHARS else NAME_TAG
            return ParseNode(tag, token.value, [], token.span)

        if token.type == TokenType.LPAREN:
            return self._parse_sexpr()

        self._error("expression")

    def _parse_sexpr(self) -> ParseNode:
        """Parse '(' <expr>* ')'."""
        open_token = self._current()
        if self.depth >= self.MAX_DEPTH:
            raise error_nesting_too_deep(
                self.MAX_DEPTH, open_token.span, self._source_line(open_token.span.start.line)
            )
        self._advance()
        self.depth += 1
        children = [ParseNode(CHAR_TAG, open_token.lexeme, [], open_token.span)]

        while not self._check(TokenType.RPAREN):
            if self._is_at_end():
                self._error("')'")
            children.append(self._parse_expr())

        close_token = self._advance()
        self.depth -= 1
        children.append(ParseNode(CHAR_TAG, close_token.lexeme, [], close_token.span))
        return ParseNode(SEXPR_TAG, "", children, self._span_from(open_token))

    # =========================================================================
    # Program
    # =========================================================================

    def parse_program(self) -> ParseNode:
        """Parse a complete input line: /^/ <expr>* /$/."""
        start = self._current()
        children = [self._anchor()]

        while not self._is_at_end():
            if self._check(TokenType.RPAREN):
                self._error("expression")
            children.append(self._parse_expr())

        children.append(self._anchor())
        return ParseNode(ROOT_TAG, "", children, SourceSpan(start.span.start, self._current().span.end))


def parse(tokens: List[Token], filename: Optional[str] = None, source: Optional[str] = None) -> ParseNode:
    """
    Convenience function to parse tokens into a parse tree.

    Args:
        tokens: List of tokens from lexer
        filename: Optional filename for error messages
        source: Optional original source, used to quote the offending line

    Returns:
        Root ParseNode

    Raises:
        ParserError: If parsing fails
    """
    parser = Parser(tokens, filename, source)
    return parser.parse_program()


def parse_source(source: str, filename: Optional[str] = None) -> ParseNode:
    """Tokenize and parse source text in one call."""
    from .lexer import tokenize
    return parse(tokenize(source, filename), filename, source)
