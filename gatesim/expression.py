"""Evaluation of gate logic expressions such as ``(i1&~i2)|i3``.

Variables are referred to by a single digit: ``i1`` is the first input,
``i2`` the second and so on.  Any character that is neither a digit, an
operator nor a parenthesis is ignored, so the ``i`` prefix is optional.
Malformed expressions evaluate to ``False`` rather than raising.
"""

from __future__ import annotations

from collections.abc import Sequence

OPERATORS = frozenset("&|~")
_DIGITS = frozenset("0123456789")

_PRECEDENCE = {"~": 3, "&": 2, "|": 1}


def precedence(op: str) -> int:
    """Return the binding strength of an operator, or -1 for anything else."""
    return _PRECEDENCE.get(op, -1)


def is_operator(char: str) -> bool:
    """Tell whether ``char`` is one of the logic operators ``&``, ``|`` or ``~``."""
    return char in OPERATORS


def infix_to_postfix(infix: str) -> str:
    """Convert an infix logic expression to postfix notation."""
    stack: list[str] = []
    output: list[str] = []

    for char in infix:
        if char in _DIGITS:
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        elif is_operator(char):
            while stack and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)

    output.extend(reversed(stack))
    return "".join(output)


def evaluate_postfix(postfix: str, variables: Sequence[bool]) -> bool:
    """Evaluate a postfix expression against the given input values.

    Returns ``False`` when the expression refers to a missing input, lacks
    operands, or does not reduce to exactly one value.
    """
    stack: list[bool] = []

    for char in postfix:
        if char == "~":
            if stack:
                stack.append(not stack.pop())
        elif is_operator(char):
            if len(stack) < 2:
                return False
            right = stack.pop()
            left = stack.pop()
            stack.append(left and right if char == "&" else left or right)
        elif char in _DIGITS:
            index = int(char)
            if index < 1 or index > len(variables):
                return False
            stack.append(bool(variables[index - 1]))

    if len(stack) != 1:
        return False
    return stack[0]


def evaluate_expression(expression: str, variables: Sequence[bool]) -> bool:
    """Evaluate an infix logic expression against the given input values."""
    return evaluate_postfix(infix_to_postfix(expression), variables)