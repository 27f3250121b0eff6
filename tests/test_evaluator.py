"""
Tests for the tree-walking evaluator.
"""

import pytest

from junior import evaluate_source, LexerError, ParserError
from junior.runtime import (
    Evaluator, BuiltinRegistry, BuiltinOperator, evaluate,
    Number, Error, Symbol, Expression, ErrorKind,
    make_number, make_error, make_expression, make_symbol,
)


def sexpr(*children):
    return Expression(list(children))


class TestSelfEvaluating:
    """Leaves evaluate to themselves."""

    def test_number(self):
        assert evaluate(Number(5)) == Number(5)

    def test_symbol_is_not_resolved(self):
        assert evaluate(Symbol("x")) == Symbol("x")

    def test_error(self):
        err = make_error(ErrorKind.BAD_OP)
        assert evaluate(err) is err


class TestExpressionShapes:
    """Empty, singleton and non-symbol-headed expressions."""

    def test_empty_expression_identity(self):
        expr = sexpr()
        result = evaluate(expr)
        assert result is expr
        assert result == Expression([])

    def test_singleton_unwrap(self):
        assert evaluate(sexpr(Number(5))) == Number(5)

    def test_nested_singletons(self):
        assert evaluate(sexpr(sexpr(sexpr(Number(5))))) == Number(5)

    def test_singleton_symbol(self):
        assert evaluate(sexpr(Symbol("+"))) == Symbol("+")

    def test_singleton_empty(self):
        assert evaluate(sexpr(sexpr())) == Expression([])

    def test_not_a_symbol(self):
        result = evaluate(sexpr(Number(1), Number(2)))
        assert isinstance(result, Error)
        assert result.kind is ErrorKind.NOT_SYMBOL
        assert result.message == "S-expression does not start with a symbol"

    def test_head_evaluated_to_number(self):
        result = evaluate(sexpr(sexpr(Symbol("+"), Number(1)), Number(2)))
        assert result.kind is ErrorKind.NOT_SYMBOL


class TestArithmetic:
    """Operator application through the evaluator."""

    @pytest.mark.parametrize("a,b", [(7, 2), (-7, 2), (7, -2), (-9, -4), (0, 3)])
    def test_truncating_division(self, a, b):
        q = abs(a) // abs(b)
        expected = q if (a < 0) == (b < 0) else -q
        assert evaluate(sexpr(Symbol("/"), Number(a), Number(b))) == Number(expected)

    def test_division_by_zero(self):
        result = evaluate(sexpr(Symbol("/"), Number(7), Number(0)))
        assert result.kind is ErrorKind.DIV_ZERO

    def test_left_associative_subtraction(self):
        assert evaluate(sexpr(Symbol("-"), Number(10), Number(3), Number(2))) == Number(5)

    def test_unary_negation(self):
        assert evaluate(sexpr(Symbol("-"), Number(4))) == Number(-4)

    def test_nested_operands(self):
        value = sexpr(
            Symbol("+"),
            Number(1),
            sexpr(Symbol("*"), Number(2), Number(3)),
            sexpr(Symbol("-"), Number(10), Number(4)),
        )
        assert evaluate(value) == Number(13)

    def test_non_number_operand(self):
        two = Number(2)
        expr = sexpr(Symbol("+"), Symbol("x"), two)
        result = evaluate(expr)
        assert result.kind is ErrorKind.NOT_NUMBER
        assert len(expr) == 0

    def test_empty_expression_operand_is_not_a_number(self):
        result = evaluate(sexpr(Symbol("+"), Number(1), sexpr()))
        assert result.kind is ErrorKind.NOT_NUMBER

    def test_symbol_only(self):
        result = evaluate(sexpr(Symbol("*"), sexpr()))
        assert result.kind is ErrorKind.NOT_NUMBER

    def test_unknown_operator(self):
        result = evaluate(sexpr(Symbol("foo"), Number(1)))
        assert result.kind is ErrorKind.BAD_OP


class TestErrorPropagation:
    """The first error, left to right, replaces the whole expression."""

    def test_error_child_propagates(self):
        value = sexpr(
            Symbol("+"),
            Number(1),
            sexpr(Symbol("/"), Number(1), Number(0)),
        )
        result = evaluate(value)
        assert result.kind is ErrorKind.DIV_ZERO
        assert len(value) == 0

    def test_first_error_wins(self):
        value = sexpr(
            Symbol("+"),
            sexpr(Symbol("%"), Number(1), Number(0)),
            sexpr(Symbol("/"), Number(1), Number(0)),
        )
        assert evaluate(value).kind is ErrorKind.MOD_ZERO

    def test_later_siblings_not_evaluated(self):
        calls = []
        registry = BuiltinRegistry()
        registry.register(BuiltinOperator(
            "spy", lambda a, b: (calls.append((a, b)), make_number(a + b))[1],
        ))
        evaluator = Evaluator(registry)

        spied = sexpr(Symbol("spy"), Number(1), Number(2))
        value = sexpr(
            Symbol("+"),
            sexpr(Symbol("/"), Number(1), Number(0)),
            spied,
        )
        result = evaluator.evaluate(value)
        assert result.kind is ErrorKind.DIV_ZERO
        assert calls == []

    def test_deeply_nested_error_degrades_whole_result(self):
        value = sexpr(
            Symbol("*"),
            Number(2),
            sexpr(Symbol("+"), Number(1), sexpr(Symbol("-"), sexpr(Symbol("/"), Number(5), Number(0)))),
        )
        assert evaluate(value).kind is ErrorKind.DIV_ZERO

    def test_error_leaf_in_expression(self):
        value = sexpr(Symbol("+"), Number(1), make_error(ErrorKind.BAD_NUM))
        result = evaluate(value)
        assert result.kind is ErrorKind.BAD_NUM
        assert result.message == "invalid number"

    def test_error_preferred_over_shape_errors(self):
        """An error child wins even when the head is not a symbol."""
        value = sexpr(Number(1), make_error(ErrorKind.BAD_NUM))
        assert evaluate(value).kind is ErrorKind.BAD_NUM


class TestIdempotence:
    """evaluate(evaluate(v)) == evaluate(v)."""

    @pytest.mark.parametrize("source", [
        "",
        "5",
        "()",
        "(())",
        "+",
        "+ 1 2",
        "(- 3)",
        "/ 1 0",
        "1 2",
        "(+ 1 (* 2 3)) ",
        "foo 1",
    ])
    def test_fixed_point(self, source):
        once = evaluate_source(source)
        assert evaluate(once) == once


class TestEvaluateSource:
    """End-to-end evaluation of source text."""

    @pytest.mark.parametrize("source,expected", [
        ("+ 1 2", Number(3)),
        ("+ 1 (* 2 3)", Number(7)),
        ("(/ 10 3)", Number(3)),
        ("- (* 10 10) (+ 1 1 1)", Number(97)),
        ("% 10 3", Number(1)),
        ("-5", Number(-5)),
        ("- -5", Number(5)),
        ("", Expression([])),
        ("()", Expression([])),
    ])
    def test_results(self, source, expected):
        assert evaluate_source(source) == expected

    def test_oversized_literal(self):
        result = evaluate_source("+ 1 9223372036854775808")
        assert result.kind is ErrorKind.BAD_NUM

    def test_overflow(self):
        result = evaluate_source("(- -9223372036854775808)")
        assert result.kind is ErrorKind.OVERFLOW

    def test_syntax_errors_raise(self):
        with pytest.raises(ParserError):
            evaluate_source("(+ 1 2")
        with pytest.raises(LexerError):
            evaluate_source("+ 1 ?")

    def test_deepest_accepted_nesting_evaluates(self):
        from junior import Parser
        depth = Parser.MAX_DEPTH
        source = "(+ 1 " * depth + "0" + ")" * depth
        assert evaluate_source(source) == Number(depth)
