import regex as re
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Iterator

# Binary operators and their precedence. No associativity is modeled.
PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "^": 3,
}

_TOKEN_PATTERN = re.compile(r"\d+(?:\.\d+)?|[+\-*/^()]")


class TokenKind(StrEnum):
    NUMBER = "number"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    @property
    def value(self) -> float:
        if self.kind != TokenKind.NUMBER:
            raise ValueError(f"Token '{self.text}' is not a number")
        return float(self.text)

    @property
    def precedence(self) -> int:
        return PRECEDENCE.get(self.text, 0) if self.kind == TokenKind.OPERATOR else 0

    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR

    def is_number(self) -> bool:
        return self.kind == TokenKind.NUMBER

    def swapped(self) -> "Token":
        """Return the opposite parenthesis; other tokens are returned unchanged."""
        if self.kind == TokenKind.LPAREN:
            return RPAREN
        if self.kind == TokenKind.RPAREN:
            return LPAREN
        return self

    def __str__(self) -> str:
        return self.text


LPAREN = Token(TokenKind.LPAREN, "(")
RPAREN = Token(TokenKind.RPAREN, ")")


def _classify(text: str) -> Token:
    if text == "(":
        return LPAREN
    if text == ")":
        return RPAREN
    if text in PRECEDENCE:
        return Token(TokenKind.OPERATOR, text)
    return Token(TokenKind.NUMBER, text)


def tokenize(expression: str) -> Iterator[Token]:
    """
    Scan an arithmetic expression left to right.

    Numbers are runs of digits with an optional single fractional part, the
    remaining tokens are ``+ - * / ^ ( )``. Anything else, whitespace included,
    is skipped.

    Args:
        expression: Raw expression text.

    Yields:
        Tokens in source order. Never raises.
    """
    for match in _TOKEN_PATTERN.finditer(expression):
        yield _classify(match.group(0))


def tokenize_list(expression: str) -> list[Token]:
    return list(tokenize(expression))


def render(tokens: Iterable[Token], separator: str = "") -> str:
    return separator.join(token.text for token in tokens)
