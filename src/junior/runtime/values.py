"""
Runtime values for the evaluator.

A value is exactly one of ``Number``, ``Error``, ``Symbol`` or
``Expression``. The first three are immutable leaves. An ``Expression``
owns its children: a child is never shared between two expressions, so a
child moved out with ``remove_at``/``take_at`` belongs to the caller alone.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class ErrorKind(Enum):
    """Failure kinds carried by ``Error`` values, with their default message."""
    DIV_ZERO = "division by zero"
    MOD_ZERO = "modulus by zero"
    BAD_OP = "bad operator"
    BAD_NUM = "invalid number"
    NOT_NUMBER = "cannot operate on a non-number"
    NOT_SYMBOL = "S-expression does not start with a symbol"
    NO_OPERANDS = "operator requires at least one operand"
    OVERFLOW = "integer overflow"
    BAD_NODE = "unrecognized parse tree node"


class Value:
    """Base class for all runtime values."""
    __slots__ = ()


@dataclass(frozen=True)
class Number(Value):
    """A signed 64-bit integer."""
    value: int

    def __repr__(self) -> str:
        return f"Number({self.value})"


@dataclass(frozen=True)
class Error(Value):
    """A failure, carried as an ordinary value."""
    kind: ErrorKind
    message: str

    def __repr__(self) -> str:
        return f"Error({self.kind.name}, {self.message!r})"


@dataclass(frozen=True)
class Symbol(Value):
    """An operator or identifier name."""
    name: str

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"


@dataclass
class Expression(Value):
    """
    An S-expression: an ordered list of owned child values.

    Children are moved out with ``remove_at`` (the expression stays usable)
    or ``take_at`` (the expression is emptied and should be dropped).
    """
    children: List[Value] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Expression({self.children!r})"

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.children)

    def __getitem__(self, index: int) -> Value:
        return self.children[index]

    def append(self, child: Value) -> "Expression":
        """Append ``child``, taking ownership of it. Returns self."""
        if not isinstance(child, Value):
            raise TypeError(f"cannot append {type(child).__name__} to an expression")
        self.children.append(child)
        return self

    def remove_at(self, index: int) -> Value:
        """
        Remove and return the child at ``index``.

        Later children shift left by one. Raises IndexError unless
        ``0 <= index < len(self)``.
        """
        if not 0 <= index < len(self.children):
            raise IndexError(
                f"child index {index} out of range for expression of length {len(self.children)}"
            )
        return self.children.pop(index)

    def take_at(self, index: int) -> Value:
        """Remove and return the child at ``index``, then empty this expression."""
        child = self.remove_at(index)
        destroy(self)
        return child


# Convenience constructors

def make_number(x: int) -> Number:
    """Create a number value."""
    return Number(int(x))


def make_error(kind: ErrorKind, message: Optional[str] = None) -> Error:
    """Create an error value; the message defaults to the kind's text."""
    return Error(kind, message if message is not None else kind.value)


def make_symbol(name: str) -> Symbol:
    """Create a symbol value."""
    return Symbol(str(name))


def make_expression(*children: Value) -> Expression:
    """Create an expression, empty unless children are given."""
    expr = Expression()
    for child in children:
        expr.append(child)
    return expr


# Ownership helpers

def append(expr: Value, child: Value) -> Expression:
    """Append ``child`` to ``expr``. ``expr`` must be an Expression."""
    if not isinstance(expr, Expression):
        raise TypeError(f"cannot append to {type(expr).__name__}")
    return expr.append(child)


def remove_at(expr: Expression, index: int) -> Value:
    """Remove and return the child of ``expr`` at ``index``."""
    return expr.remove_at(index)


def take_at(expr: Expression, index: int) -> Value:
    """Remove the child at ``index`` and discard the rest of ``expr``."""
    return expr.take_at(index)


def destroy(value: Value) -> None:
    """Release ``value``, emptying every nested expression."""
    if isinstance(value, Expression):
        for child in value.children:
            destroy(child)
        value.children.clear()


# Type checking utilities

def is_number(value: Value) -> bool:
    return isinstance(value, Number)


def is_error(value: Value) -> bool:
    return isinstance(value, Error)


def is_symbol(value: Value) -> bool:
    return isinstance(value, Symbol)


def is_expression(value: Value) -> bool:
    return isinstance(value, Expression)


def fits_int64(n: int) -> bool:
    """Check if ``n`` is representable as a signed 64-bit integer."""
    return INT64_MIN <= n <= INT64_MAX
