"""
Tree-walking evaluator.

Reduces a value tree to a single value by evaluating S-expressions
bottom-up and dispatching their leading symbol to the builtin operators.
"""

import logging
from typing import Optional

from .values import Value, Expression, Symbol, Error, ErrorKind, make_error, destroy
from .builtins import BuiltinRegistry, apply, get_builtin_registry

logger = logging.getLogger(__name__)


class Evaluator:
    """
    Evaluates values against a builtin operator registry.

    The evaluator keeps no state between calls; ``evaluate`` owns its
    argument for the duration of the call and returns either that value,
    a child taken from it, or a new value.
    """

    def __init__(self, registry: Optional[BuiltinRegistry] = None):
        self.registry = registry or get_builtin_registry()

    def evaluate(self, value: Value) -> Value:
        """Reduce ``value`` to its result."""
        if isinstance(value, Expression):
            return self._evaluate_sexpr(value)
        return value

    def _evaluate_sexpr(self, expr: Expression) -> Value:
        # Evaluate children in place, stopping at the first error
        for i in range(len(expr)):
            expr.children[i] = self.evaluate(expr.children[i])
            if isinstance(expr.children[i], Error):
                logger.debug("short-circuiting on %r at child %d", expr.children[i], i)
                return expr.take_at(i)

        if len(expr) == 0:
            return expr

        if len(expr) == 1:
            return expr.take_at(0)

        head = expr.remove_at(0)
        if not isinstance(head, Symbol):
            destroy(expr)
            return make_error(ErrorKind.NOT_SYMBOL)

        logger.debug("applying %r to %d operand(s)", head.name, len(expr))
        return apply(head.name, expr, self.registry)


# Shared default evaluator
_evaluator: Optional[Evaluator] = None


def evaluate(value: Value) -> Value:
    """
    Evaluate a value with the default builtin registry.

    This is a convenience wrapper around Evaluator.evaluate().
    """
    global _evaluator
    if _evaluator is None:
        _evaluator = Evaluator()
    return _evaluator.evaluate(value)


def evaluate_source(source: str, filename: Optional[str] = None) -> Value:
    """
    Tokenize, parse, read and evaluate source text in one call.

        from junior import evaluate_source

        result = evaluate_source("+ 1 (* 2 3)")   # Number(7)

    Args:
        source: Junior source text
        filename: Optional filename for error messages

    Returns:
        The resulting value (possibly an Error value)

    Raises:
        LexerError, ParserError: If the source is not syntactically valid
    """
    from ..parser import parse_source
    from .reader import read

    tree = parse_source(source, filename)
    return evaluate(read(tree))
