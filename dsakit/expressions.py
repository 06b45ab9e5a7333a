"""Arithmetic expressions of single-digit operands: evaluation and notation changes."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

OPERATORS = "+-*/"
_BRACKET_PAIRS = {")": "(", "}": "{", "]": "["}
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
_DEFAULT_PRECEDENCE = 1

T = TypeVar("T")


def priority(operator: str) -> int:
    """Return the precedence of ``operator``: 2 for ``*`` and ``/``, 1 otherwise."""
    return _PRECEDENCE.get(operator, _DEFAULT_PRECEDENCE)


def apply_operator(left: int, right: int, operator: str) -> int:
    """Combine two integers; division truncates toward zero."""
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        if right == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(left) // abs(right)
        return -quotient if (left < 0) != (right < 0) else quotient
    raise ValueError(f"unknown operator {operator!r}")


def _tokens(expression: str) -> Iterator[str]:
    for ch in expression:
        if ch.isspace():
            continue
        if not (ch.isdigit() or ch in OPERATORS or ch in "()"):
            raise ValueError(f"unexpected character {ch!r}")
        yield ch


def _from_infix(
    expression: str,
    operand: Callable[[str], T],
    combine: Callable[[T, T, str], T],
) -> T:
    values: list[T] = []
    ops: list[str] = []

    def reduce() -> None:
        op = ops.pop()
        if len(values) < 2:
            raise ValueError("operator is missing an operand")
        right = values.pop()
        left = values.pop()
        values.append(combine(left, right, op))

    for ch in _tokens(expression):
        if ch.isdigit():
            values.append(operand(ch))
        elif ch == "(":
            ops.append(ch)
        elif ch == ")":
            while ops and ops[-1] != "(":
                reduce()
            if not ops:
                raise ValueError("unmatched ')'")
            ops.pop()
        else:
            while ops and ops[-1] != "(" and priority(ch) <= priority(ops[-1]):
                reduce()
            ops.append(ch)

    while ops:
        if ops[-1] == "(":
            raise ValueError("unmatched '('")
        reduce()
    if len(values) != 1:
        raise ValueError("malformed expression")
    return values[0]


def _from_prefix(
    expression: str,
    operand: Callable[[str], T],
    combine: Callable[[T, T, str], T],
) -> T:
    stack: list[T] = []
    for ch in reversed(list(_tokens(expression))):
        if ch.isdigit():
            stack.append(operand(ch))
        elif ch in OPERATORS:
            if len(stack) < 2:
                raise ValueError("operator is missing an operand")
            left = stack.pop()
            right = stack.pop()
            stack.append(combine(left, right, ch))
        else:
            raise ValueError("brackets are not allowed in prefix notation")
    if len(stack) != 1:
        raise ValueError("malformed expression")
    return stack[0]


def evaluate_infix(expression: str) -> int:
    """Evaluate an infix expression with brackets and single-digit operands."""
    return _from_infix(expression, int, apply_operator)


def infix_to_prefix(expression: str) -> str:
    """Rewrite an infix expression in prefix notation."""
    return _from_infix(expression, str, lambda left, right, op: op + left + right)


def prefix_to_infix(expression: str) -> str:
    """Rewrite a prefix expression in infix notation, without brackets."""
    return _from_prefix(expression, str, lambda left, right, op: left + op + right)


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single-digit operands."""
    return _from_prefix(expression, int, apply_operator)


def is_balanced(expression: str) -> bool:
    """Tell whether each kind of bracket opens and closes in matching numbers.

    Each kind is counted on its own, so the kinds may interleave; a closing
    bracket with no open one of its kind before it makes the text unbalanced.
    """
    depth = {opener: 0 for opener in _BRACKET_PAIRS.values()}
    for ch in expression:
        if ch in depth:
            depth[ch] += 1
        elif ch in _BRACKET_PAIRS:
            opener = _BRACKET_PAIRS[ch]
            if depth[opener] == 0:
                return False
            depth[opener] -= 1
    return all(count == 0 for count in depth.values())