"""
Copyright (C) 2025 yuygfgg

This file is part of exprconv.

exprconv is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

exprconv is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with exprconv.  If not, see <https://www.gnu.org/licenses/>.
"""

import pytest

from exprconv import ConversionError, ConversionMode
from exprconv.infix2postfix import infix2postfix, infix2postfix_tokens, validate_infix
from exprconv.infix2prefix import infix2prefix, infix2prefix_tokens
from exprconv.tokenizer import tokenize_list


@pytest.mark.parametrize(
    "infix, postfix",
    [
        ("3+4*2", "342*+"),
        ("(1+2)*3", "12+3*"),
        ("8/(4-2)", "842-/"),
        ("10-3-2", "103-2-"),
        ("2^3^2", "23^2^"),
        ("1.5 * 4 + 2", "1.54*2+"),
        ("", ""),
        ("42", "42"),
    ],
)
def test_infix2postfix(infix: str, postfix: str) -> None:
    assert infix2postfix(infix) == postfix


@pytest.mark.parametrize(
    "infix, prefix",
    [
        ("3+4*2", "+3*42"),
        ("(1+2)*3", "*+123"),
        ("8/(4-2)", "/8-42"),
        ("10-3-2", "-10-32"),
        ("2^3^2", "^2^32"),
        ("", ""),
        ("42", "42"),
    ],
)
def test_infix2prefix(infix: str, prefix: str) -> None:
    assert infix2prefix(infix) == prefix


def test_separator():
    assert infix2postfix("3+4*2", separator=" ") == "3 4 2 * +"
    assert infix2prefix("3+4*2", separator=" ") == "+ 3 * 4 2"


def test_accepts_tokens():
    tokens = tokenize_list("12 + 3")
    assert [t.text for t in infix2postfix_tokens(tokens)] == ["12", "3", "+"]
    assert [t.text for t in infix2prefix_tokens(tokens)] == ["+", "12", "3"]


def test_same_precedence_pops_left_to_right():
    """Equal precedence pops the stack, so '^' is not treated as right associative."""
    assert infix2postfix("2^3^2", separator=" ") == "2 3 ^ 2 ^"
    assert infix2postfix("2*3/4", separator=" ") == "2 3 * 4 /"


class TestLenientMode:
    """Malformed parentheses degrade instead of raising."""

    def test_unmatched_close_is_ignored(self):
        assert infix2postfix("3+4)") == "34+"
        assert infix2postfix(")3") == "3"

    def test_unmatched_open_is_drained(self):
        assert infix2postfix("(3+4") == "34+("
        assert infix2prefix("(3+4") == "+34"

    def test_doubled_operator(self):
        assert infix2postfix("2 + + 3") == "2+3+"
        assert infix2prefix("2 + + 3") == "+2+3"

    def test_explicit_lenient_mode(self):
        assert infix2postfix("((1", mode=ConversionMode.LENIENT) == "1(("


class TestStrictMode:
    @pytest.mark.parametrize(
        "infix",
        ["(1+2", "1+2)", "", "   ", "2++3", "3+", "*3", "()", "3(4)", "(1)(2)", "1 2"],
    )
    def test_rejects(self, infix: str) -> None:
        with pytest.raises(ConversionError):
            infix2postfix(infix, mode=ConversionMode.STRICT)
        with pytest.raises(ConversionError):
            infix2prefix(infix, mode=ConversionMode.STRICT)

    @pytest.mark.parametrize("infix", ["3+4*2", "(1+2)*3", "((7))", "2^(1+1)"])
    def test_accepts(self, infix: str) -> None:
        assert infix2postfix(infix, mode=ConversionMode.STRICT) == infix2postfix(infix)
        assert infix2prefix(infix, mode=ConversionMode.STRICT) == infix2prefix(infix)

    def test_mode_accepts_string_value(self):
        with pytest.raises(ConversionError):
            infix2postfix("(1", mode="strict")

    def test_error_names_expression(self):
        with pytest.raises(ConversionError, match=r"\(1\+2") as excinfo:
            validate_infix(tokenize_list("(1+2"), "(1+2")
        assert excinfo.value.expression == "(1+2"
