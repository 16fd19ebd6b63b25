import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

import numpy as np

from .errors import StructuralEvaluationError, UnsupportedOperatorError
from .tokenizer import Token, render, tokenize_list

logger = logging.getLogger(__name__)

OPERATIONS = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "^": np.power,
}

NotationInput = Union[str, Iterable[Token]]


@dataclass(frozen=True)
class Leaf:
    value: float


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: "Node"
    right: "Node"


Node = Union[Leaf, BinaryOp]


def apply_operator(op: str, left: float, right: float) -> float:
    """
    Apply a binary operator with IEEE-754 double semantics.

    Division by zero gives an infinity or nan and ``^`` follows the C ``pow``
    rules, so a negative base with a fractional exponent gives nan.
    """
    try:
        func = OPERATIONS[op]
    except KeyError:
        raise UnsupportedOperatorError(op) from None
    with np.errstate(all="ignore"):
        return float(func(np.float64(left), np.float64(right)))


def _prepare(
    notation: NotationInput, expression: Optional[str]
) -> tuple[list[Token], str]:
    if isinstance(notation, str):
        tokens = tokenize_list(notation)
        return tokens, expression if expression is not None else notation
    tokens = list(notation)
    return tokens, expression if expression is not None else render(tokens, " ")


def _leaf(token: Token, expression: str) -> Leaf:
    try:
        return Leaf(token.value)
    except ValueError:
        raise StructuralEvaluationError(
            f"Unparseable operand '{token.text}'", expression
        ) from None


def _check_operator(token: Token, expression: str):
    if token.text not in OPERATIONS:
        raise UnsupportedOperatorError(token.text, expression)


def _single_root(stack: list[Node], kind: str, expression: str) -> Node:
    if len(stack) != 1:
        raise StructuralEvaluationError(
            f"Invalid {kind} expression, {len(stack)} values left on the stack",
            expression,
        )
    return stack[0]


def build_prefix_tree(
    prefix: NotationInput, expression: Optional[str] = None
) -> Node:
    """
    Build an expression tree from prefix notation.

    Tokens are read right to left. An operator takes the first node popped as
    its left operand and the second as its right operand. Parenthesis tokens
    are skipped.

    Args:
        prefix: Prefix text or tokens.
        expression: Name used in error messages, defaults to the input.

    Raises:
        StructuralEvaluationError: Operand shortage, leftover operands or an
            unparseable operand.
        UnsupportedOperatorError: Operator outside ``+ - * / ^``.
    """
    tokens, expression = _prepare(prefix, expression)
    stack: list[Node] = []

    for token in reversed(tokens):
        if token.is_number():
            stack.append(_leaf(token, expression))
        elif token.is_operator():
            _check_operator(token, expression)
            if len(stack) < 2:
                raise StructuralEvaluationError(
                    f"Operator '{token.text}' needs 2 operands, have {len(stack)} "
                    "in prefix expression",
                    expression,
                )
            left = stack.pop()
            right = stack.pop()
            stack.append(BinaryOp(token.text, left, right))

    return _single_root(stack, "prefix", expression)


def build_postfix_tree(
    postfix: NotationInput, expression: Optional[str] = None
) -> Node:
    """
    Build an expression tree from postfix notation.

    Tokens are read left to right. An operator takes the first node popped as
    its right operand and the second as its left operand. Parenthesis tokens
    are skipped.

    Raises:
        StructuralEvaluationError: Operand shortage, leftover operands or an
            unparseable operand.
        UnsupportedOperatorError: Operator outside ``+ - * / ^``.
    """
    tokens, expression = _prepare(postfix, expression)
    stack: list[Node] = []

    for token in tokens:
        if token.is_number():
            stack.append(_leaf(token, expression))
        elif token.is_operator():
            _check_operator(token, expression)
            if len(stack) < 2:
                raise StructuralEvaluationError(
                    f"Operator '{token.text}' needs 2 operands, have {len(stack)} "
                    "in postfix expression",
                    expression,
                )
            right = stack.pop()
            left = stack.pop()
            stack.append(BinaryOp(token.text, left, right))

    return _single_root(stack, "postfix", expression)


def evaluate_tree(root: Node) -> float:
    """
    Reduce a tree bottom-up.

    Uses an explicit stack so deeply nested trees do not hit the recursion
    limit.
    """
    values: list[float] = []
    pending: list[tuple[Node, bool]] = [(root, False)]

    while pending:
        node, expanded = pending.pop()
        if isinstance(node, Leaf):
            values.append(node.value)
        elif expanded:
            right = values.pop()
            left = values.pop()
            values.append(apply_operator(node.op, left, right))
        else:
            pending.append((node, True))
            pending.append((node.right, False))
            pending.append((node.left, False))

    return values[0]


def evaluate_prefix(prefix: NotationInput, expression: Optional[str] = None) -> float:
    return evaluate_tree(build_prefix_tree(prefix, expression))


def evaluate_postfix(
    postfix: NotationInput, expression: Optional[str] = None
) -> float:
    return evaluate_tree(build_postfix_tree(postfix, expression))
