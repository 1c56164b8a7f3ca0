"""Arithmetic on single-digit operands: infix and postfix evaluation, infix to postfix."""

from __future__ import annotations

from collections.abc import Iterator

_DIGITS = "0123456789"
_OPERATORS = "+-*/"
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


def precedence(operator: str) -> int:
    """Binding strength of ``operator``: 1 for + and -, 2 for * and /, else 0."""
    return _PRECEDENCE.get(operator, 0)


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left >= 0) == (right > 0) else -quotient


def _tokens(expression: str) -> Iterator[str]:
    for ch in expression:
        if ch.isspace():
            continue
        if ch in _DIGITS or ch in _OPERATORS or ch in "()":
            yield ch
        else:
            raise ValueError(f"invalid character {ch!r} in expression")


def _reduce(numbers: list[int], operator: str) -> None:
    if len(numbers) < 2:
        raise ValueError(f"missing operand for {operator!r}")
    right = numbers.pop()
    left = numbers.pop()
    numbers.append(_apply(operator, left, right))


def evaluate_infix(expression: str) -> int:
    """Evaluate an infix expression of digits, + - * / and parentheses.

    Division truncates toward zero.
    """
    numbers: list[int] = []
    operators: list[str] = []
    for token in _tokens(expression):
        if token in _DIGITS:
            numbers.append(int(token))
        elif token == "(":
            operators.append(token)
        elif token == ")":
            while operators and operators[-1] != "(":
                _reduce(numbers, operators.pop())
            if not operators:
                raise ValueError("unbalanced parentheses")
            operators.pop()
        else:
            while operators and precedence(operators[-1]) >= precedence(token):
                _reduce(numbers, operators.pop())
            operators.append(token)
    while operators:
        operator = operators.pop()
        if operator == "(":
            raise ValueError("unbalanced parentheses")
        _reduce(numbers, operator)
    if len(numbers) != 1:
        raise ValueError("malformed expression")
    return numbers[0]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits and + - * /."""
    numbers: list[int] = []
    for token in _tokens(expression):
        if token in _DIGITS:
            numbers.append(int(token))
        elif token in _OPERATORS:
            _reduce(numbers, token)
        else:
            raise ValueError("parentheses are not allowed in postfix")
    if len(numbers) != 1:
        raise ValueError("malformed expression")
    return numbers[0]


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix with tokens separated by spaces."""
    output: list[str] = []
    operators: list[str] = []
    for token in _tokens(expression):
        if token in _DIGITS:
            output.append(token)
        elif token == "(":
            operators.append(token)
        elif token == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise ValueError("unbalanced parentheses")
            operators.pop()
        else:
            while (
                operators
                and operators[-1] != "("
                and precedence(token) <= precedence(operators[-1])
            ):
                output.append(operators.pop())
            operators.append(token)
    while operators:
        operator = operators.pop()
        if operator == "(":
            raise ValueError("unbalanced parentheses")
        output.append(operator)
    return " ".join(output)