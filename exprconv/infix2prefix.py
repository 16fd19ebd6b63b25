import logging
from typing import Optional

from .config import CONVERSION_CONFIG, ConversionMode
from .infix2postfix import (
    InfixInput,
    _as_tokens,
    _resolve_mode,
    shunting_yard,
    validate_infix,
)
from .tokenizer import Token, render

logger = logging.getLogger(__name__)


def infix2prefix_tokens(
    infix: InfixInput, mode: Optional[ConversionMode] = None
) -> list[Token]:
    """
    Convert infix to a prefix token list.

    The infix tokens are reversed with their parentheses swapped, put through
    the postfix algorithm, and the result is reversed again. Because the
    postfix pass folds equal precedence left to right, the mirrored pass folds
    it right to left: ``10-3-2`` becomes ``- 10 - 3 2``.
    """
    tokens, expression = _as_tokens(infix)
    if _resolve_mode(mode) == ConversionMode.STRICT:
        validate_infix(tokens, expression)
    mirrored = [token.swapped() for token in reversed(tokens)]
    prefix = shunting_yard(mirrored)
    prefix.reverse()
    logger.debug("prefix of %r: %s", expression, render(prefix, " "))
    return prefix


def infix2prefix(
    infix: InfixInput,
    mode: Optional[ConversionMode] = None,
    separator: Optional[str] = None,
) -> str:
    """
    Convert an infix expression to a prefix string, e.g. ``"3+4*2"`` to ``"+3*42"``.
    """
    if separator is None:
        separator = CONVERSION_CONFIG["separator"]
    return render(infix2prefix_tokens(infix, mode), separator)
