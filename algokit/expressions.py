"""Stack-based expression helpers: infix to postfix and redundant parentheses."""

from __future__ import annotations

OPERATORS = frozenset("+-*/")


def precedence(symbol: str) -> int:
    """Binding strength of an operator; 0 for '(' and -1 for anything else."""
    if symbol == "(":
        return 0
    if symbol in ("+", "-"):
        return 1
    if symbol in ("*", "/"):
        return 2
    if symbol == "^":
        return 3
    return -1


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix form."""
    stack: list[str] = []
    result: list[str] = []
    for symbol in expression:
        if symbol.isspace():
            continue
        if _is_operand(symbol):
            result.append(symbol)
        elif symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while stack and stack[-1] != "(":
                result.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
        else:
            while stack and precedence(symbol) <= precedence(stack[-1]):
                result.append(stack.pop())
            stack.append(symbol)
    while stack:
        symbol = stack.pop()
        if symbol == "(":
            raise ValueError("unbalanced parentheses")
        result.append(symbol)
    return "".join(result)


def has_redundant_parentheses(expression: str) -> bool:
    """Whether some pair of parentheses encloses no operator of its own."""
    stack: list[str] = []
    redundant = False
    for symbol in expression:
        if symbol in OPERATORS or symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            if not stack:
                raise ValueError("unbalanced parentheses")
            if stack[-1] == "(":
                redundant = True
            while stack and stack[-1] in OPERATORS:
                stack.pop()
            if not stack:
                raise ValueError("unbalanced parentheses")
            stack.pop()
    return redundant