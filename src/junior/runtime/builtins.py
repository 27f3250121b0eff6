"""
Built-in operator registry for the evaluator.

Maps operator symbols to their integer implementations. Every
implementation returns a Value: arithmetic failures (zero divisors,
results outside the 64-bit range) come back as Error values.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
import logging

from .values import (
    Value, Number, Expression, ErrorKind,
    make_number, make_error, destroy, fits_int64,
)

logger = logging.getLogger(__name__)


def _checked(n: int) -> Value:
    """Wrap an integer result, or report overflow."""
    if not fits_int64(n):
        return make_error(ErrorKind.OVERFLOW)
    return make_number(n)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * _trunc_div(a, b)


@dataclass
class BuiltinOperator:
    """
    A built-in operator.

    ``binary`` combines the accumulator with the next operand. ``unary``,
    when set, is used instead if the operator receives exactly one operand.
    """
    name: str
    binary: Callable[[int, int], Value]
    unary: Optional[Callable[[int], Value]] = None
    doc: str = ""


class BuiltinRegistry:
    """
    Registry of all built-in operators.

    Operators are registered by symbol and can be looked up for dispatch.
    """

    def __init__(self):
        self._operators: Dict[str, BuiltinOperator] = {}
        self._register_all()

    def get_operator(self, name: str) -> Optional[BuiltinOperator]:
        """Look up an operator by symbol."""
        return self._operators.get(name)

    def register(self, op: BuiltinOperator) -> None:
        """Register an operator."""
        self._operators[op.name] = op

    def list_operators(self) -> List[BuiltinOperator]:
        """All operators, in registration order."""
        return list(self._operators.values())

    def __contains__(self, name: str) -> bool:
        return name in self._operators

    def _register_all(self) -> None:
        """Register all built-in operators."""
        self._register_arithmetic()

    # --- Arithmetic ---

    def _register_arithmetic(self) -> None:

        def _add(a: int, b: int) -> Value:
            return _checked(a + b)

        def _sub(a: int, b: int) -> Value:
            return _checked(a - b)

        def _neg(a: int) -> Value:
            return _checked(-a)

        def _mul(a: int, b: int) -> Value:
            return _checked(a * b)

        def _div(a: int, b: int) -> Value:
            if b == 0:
                return make_error(ErrorKind.DIV_ZERO)
            return _checked(_trunc_div(a, b))

        def _mod(a: int, b: int) -> Value:
            if b == 0:
                return make_error(ErrorKind.MOD_ZERO)
            return _checked(_trunc_mod(a, b))

        self.register(BuiltinOperator("+", _add, doc="Sum of all operands"))
        self.register(BuiltinOperator(
            "-", _sub, unary=_neg,
            doc="Subtract each operand from the first; negate a single operand",
        ))
        self.register(BuiltinOperator("*", _mul, doc="Product of all operands"))
        self.register(BuiltinOperator(
            "/", _div,
            doc="Divide the first operand by each of the others, truncating toward zero",
        ))
        self.register(BuiltinOperator(
            "%", _mod,
            doc="Remainder of the first operand by each of the others, with the sign of the dividend",
        ))


# Global registry instance
_registry: Optional[BuiltinRegistry] = None


def get_builtin_registry() -> BuiltinRegistry:
    """Get the global built-in operator registry."""
    global _registry
    if _registry is None:
        _registry = BuiltinRegistry()
    return _registry


def apply(op: str, operands: Expression, registry: Optional[BuiltinRegistry] = None) -> Value:
    """
    Apply the operator named ``op`` to ``operands``.

    ``operands`` is consumed: on every path it is left empty. Returns the
    reduced Number or the first Error encountered.
    """
    registry = registry or get_builtin_registry()

    builtin = registry.get_operator(op)
    if builtin is None:
        logger.debug("unknown operator %r", op)
        destroy(operands)
        return make_error(ErrorKind.BAD_OP)

    for operand in operands:
        if not isinstance(operand, Number):
            logger.debug("operator %r given non-number operand %r", op, operand)
            destroy(operands)
            return make_error(ErrorKind.NOT_NUMBER)

    if len(operands) == 0:
        return make_error(ErrorKind.NO_OPERANDS, f"operator '{op}' requires at least one operand")

    acc = operands.remove_at(0)

    if builtin.unary is not None and len(operands) == 0:
        return builtin.unary(acc.value)

    while len(operands) > 0:
        y = operands.remove_at(0)
        acc = builtin.binary(acc.value, y.value)
        if not isinstance(acc, Number):
            destroy(operands)
            return acc

    return acc
