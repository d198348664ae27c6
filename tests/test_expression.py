from itertools import product

import pytest

from gatesim.expression import (
    evaluate_expression,
    evaluate_postfix,
    infix_to_postfix,
    is_operator,
    precedence,
)


@pytest.mark.parametrize("op, expected", [("~", 3), ("&", 2), ("|", 1), ("(", -1), ("x", -1)])
def test_precedence(op, expected):
    assert precedence(op) == expected


@pytest.mark.parametrize("char", ["&", "|", "~"])
def test_is_operator_true(char):
    assert is_operator(char) is True


@pytest.mark.parametrize("char", ["(", ")", "1", "i", " "])
def test_is_operator_false(char):
    assert is_operator(char) is False


def test_postfix_keeps_only_digits_and_operators():
    postfix = infix_to_postfix("(i1&~i2)|~(i3&~i4)")
    assert set(postfix) <= set("1234&|~")
    assert [c for c in postfix if c.isdigit()] == ["1", "2", "3", "4"]
    assert "(" not in postfix and ")" not in postfix


def test_postfix_of_single_variable():
    assert infix_to_postfix("i7") == "7"


def test_postfix_operator_count_preserved():
    infix = "(i1|i2)&~(i3|i4)"
    postfix = infix_to_postfix(infix)
    for op in "&|~":
        assert postfix.count(op) == infix.count(op)


@pytest.mark.parametrize("a, b", list(product([False, True], repeat=2)))
def test_and_or_truth_tables(a, b):
    assert evaluate_expression("i1&i2", [a, b]) == (a and b)
    assert evaluate_expression("i1|i2", [a, b]) == (a or b)
    assert evaluate_expression("~i1", [a]) == (not a)


@pytest.mark.parametrize("a, b, c", list(product([False, True], repeat=3)))
def test_and_binds_tighter_than_or(a, b, c):
    assert evaluate_expression("i1|i2&i3", [a, b, c]) == (a or (b and c))
    assert evaluate_expression("(i1|i2)&i3", [a, b, c]) == ((a or b) and c)


@pytest.mark.parametrize("a, b, c, d", list(product([False, True], repeat=4)))
def test_compound_expressions(a, b, c, d):
    values = [a, b, c, d]
    assert evaluate_expression("(i1&~i2)|~(i3&~i4)", values) == (
        (a and not b) or not (c and not d)
    )
    assert evaluate_expression("(i1|i2)&~(i3|i4)", values) == ((a or b) and not (c or d))
    assert evaluate_expression("i1&i2&i3&i4", values) == (a and b and c and d)
    assert evaluate_expression("~i1&~i2&~i3&~i4", values) == (
        (not a) and (not b) and (not c) and (not d)
    )


def test_postfix_evaluation_matches_infix():
    for values in product([False, True], repeat=3):
        infix = "~(i1&i2)|i3"
        assert evaluate_postfix(infix_to_postfix(infix), list(values)) == evaluate_expression(
            infix, list(values)
        )


def test_empty_expression_is_false():
    assert evaluate_expression("", [True]) is False


def test_missing_operand_is_false():
    assert evaluate_expression("i1&", [True]) is False


def test_leftover_operands_are_false():
    assert evaluate_expression("i12", [True, True]) is False
    assert evaluate_postfix("11", [True]) is False