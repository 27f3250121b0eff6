"""
Tests for value formatting.
"""

import io

import pytest

from junior import format_value, print_value, evaluate_source
from junior.runtime import Number, Symbol, Expression, ErrorKind, make_error


class TestFormatValue:

    def test_number(self):
        assert format_value(Number(-12)) == "-12"

    def test_error(self):
        assert format_value(make_error(ErrorKind.DIV_ZERO)) == "Error: division by zero"

    def test_symbol(self):
        assert format_value(Symbol("%")) == "%"

    def test_expression(self):
        value = Expression([Symbol("+"), Number(1), Expression([Symbol("-"), Number(2)])])
        assert format_value(value) == "(+ 1 (- 2))"

    def test_empty_expression(self):
        assert format_value(Expression([])) == "()"

    def test_not_a_value(self):
        with pytest.raises(TypeError):
            format_value(3)

    def test_evaluated_results(self):
        assert format_value(evaluate_source("* 6 7")) == "42"
        assert format_value(evaluate_source("% 1 0")) == "Error: modulus by zero"


def test_print_value_writes_line():
    out = io.StringIO()
    print_value(Number(3), file=out)
    assert out.getvalue() == "3\n"
