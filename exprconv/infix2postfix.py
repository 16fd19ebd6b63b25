import logging
from typing import Iterable, Optional, Union

from .config import CONVERSION_CONFIG, ConversionMode
from .errors import ConversionError
from .tokenizer import Token, TokenKind, render, tokenize_list

logger = logging.getLogger(__name__)

InfixInput = Union[str, Iterable[Token]]


def _as_tokens(infix: InfixInput) -> tuple[list[Token], str]:
    if isinstance(infix, str):
        return tokenize_list(infix), infix
    tokens = list(infix)
    return tokens, render(tokens, " ")


def _resolve_mode(mode: Optional[ConversionMode]) -> ConversionMode:
    return ConversionMode(mode if mode is not None else CONVERSION_CONFIG["mode"])


def shunting_yard(tokens: Iterable[Token]) -> list[Token]:
    """
    Reorder infix tokens into postfix order.

    Equal precedence pops the stack top, so every operator, ``^`` included,
    folds left to right. A ``)`` with no matching ``(`` is ignored and anything
    still on the stack at the end (an unmatched ``(`` too) is appended.
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.is_number():
            output.append(token)
        elif token.kind == TokenKind.LPAREN:
            stack.append(token)
        elif token.kind == TokenKind.RPAREN:
            while stack and stack[-1].kind != TokenKind.LPAREN:
                output.append(stack.pop())
            if stack:
                stack.pop()
        elif token.is_operator():
            while (
                stack
                and stack[-1].is_operator()
                and token.precedence <= stack[-1].precedence
            ):
                output.append(stack.pop())
            stack.append(token)

    while stack:
        output.append(stack.pop())

    return output


def validate_infix(tokens: Iterable[Token], expression: Optional[str] = None):
    """
    Check that infix tokens alternate operand/operator with balanced parentheses.

    Raises:
        ConversionError: On the first problem found.
    """
    depth = 0
    expect_operand = True
    seen_any = False

    for i, token in enumerate(tokens):
        seen_any = True
        if token.kind == TokenKind.NUMBER:
            if not expect_operand:
                raise ConversionError(
                    f"Unexpected number '{token.text}' at token {i}", expression
                )
            expect_operand = False
        elif token.kind == TokenKind.LPAREN:
            if not expect_operand:
                raise ConversionError(f"Unexpected '(' at token {i}", expression)
            depth += 1
        elif token.kind == TokenKind.RPAREN:
            if expect_operand:
                raise ConversionError(f"Unexpected ')' at token {i}", expression)
            if depth == 0:
                raise ConversionError(f"Unmatched ')' at token {i}", expression)
            depth -= 1
        elif token.kind == TokenKind.OPERATOR:
            if expect_operand:
                raise ConversionError(
                    f"Operator '{token.text}' at token {i} is missing its left operand",
                    expression,
                )
            expect_operand = True

    if not seen_any:
        raise ConversionError("Empty expression", expression)
    if expect_operand:
        raise ConversionError("Expression ends with an operator", expression)
    if depth:
        raise ConversionError(f"{depth} unmatched '('", expression)


def infix2postfix_tokens(
    infix: InfixInput, mode: Optional[ConversionMode] = None
) -> list[Token]:
    """
    Convert infix to a postfix token list.

    Args:
        infix: Infix text or already tokenized infix.
        mode: LENIENT (default) never raises; STRICT validates first.

    Raises:
        ConversionError: In STRICT mode, if the infix is malformed.
    """
    tokens, expression = _as_tokens(infix)
    if _resolve_mode(mode) == ConversionMode.STRICT:
        validate_infix(tokens, expression)
    postfix = shunting_yard(tokens)
    logger.debug("postfix of %r: %s", expression, render(postfix, " "))
    return postfix


def infix2postfix(
    infix: InfixInput,
    mode: Optional[ConversionMode] = None,
    separator: Optional[str] = None,
) -> str:
    R"""
    Convert an infix expression to a postfix string.

    Args:
        infix: Input infix expression.
        mode: Conversion mode, see ``ConversionMode``.
        separator: Joins output tokens. Defaults to ``""``, giving ``"342*+"``
            for ``"3+4*2"``.

    Returns:
        Converted postfix expr.

    Raises:
        ConversionError: In STRICT mode, if the infix is malformed.
    """
    if separator is None:
        separator = CONVERSION_CONFIG["separator"]
    return render(infix2postfix_tokens(infix, mode), separator)
