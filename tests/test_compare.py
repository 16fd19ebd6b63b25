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

import math

import pytest

from exprconv.compare import compare, compare_key, results_match

nan = math.nan
inf = math.inf


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (nan, nan, 0),
        (nan, 1.0, -1),
        (1.0, nan, 1),
        (nan, -inf, -1),
        (inf, inf, 0),
        (-inf, -inf, 0),
        (inf, 100.0, 1),
        (100.0, inf, -1),
        (-inf, 100.0, -1),
        (100.0, -inf, 1),
        (inf, -inf, 1),
        (-inf, inf, -1),
        (1.0000001, 1.0000002, 0),
        (1.0, 1.0, 0),
        (1.0, 2.0, -1),
        (2.0, 1.0, 1),
        (1.0, 1.000002, -1),
        (-0.0, 0.0, 0),
    ],
)
def test_compare(x: float, y: float, expected: int) -> None:
    assert compare(x, y) == expected


def test_custom_epsilon():
    assert compare(1.0, 1.05, epsilon=0.1) == 0
    assert compare(1.0, 1.05, epsilon=0.01) == -1


def test_results_match():
    assert results_match(11.0, 11.0000000001)
    assert results_match(nan, nan)
    assert not results_match(64.0, 512.0)
    assert not results_match(nan, 0.0)


def test_total_order_for_sorting():
    ordered = sorted([3.0, inf, nan, 1.0, -inf], key=compare_key)
    assert math.isnan(ordered[0])
    assert ordered[1:] == [-inf, 1.0, 3.0, inf]
