import math
from functools import cmp_to_key
from typing import Optional

from .config import COMPARE_CONFIG


def compare(x: float, y: float, epsilon: Optional[float] = None) -> int:
    """
    Total order over floats used to decide whether two results match.

    nan equals nan and sorts below every other value. Equal infinities are
    equal, otherwise an infinity ranks by its sign. Finite values within
    ``epsilon`` of each other are equal.

    Returns:
        -1, 0 or 1.
    """
    if epsilon is None:
        epsilon = COMPARE_CONFIG["epsilon"]

    x_nan, y_nan = math.isnan(x), math.isnan(y)
    if x_nan and y_nan:
        return 0
    if x_nan:
        return -1
    if y_nan:
        return 1

    if math.isinf(x) or math.isinf(y):
        if x == y:
            return 0
        return -1 if x < y else 1

    if abs(x - y) < epsilon:
        return 0
    return -1 if x < y else 1


def results_match(x: float, y: float, epsilon: Optional[float] = None) -> bool:
    return compare(x, y, epsilon) == 0


compare_key = cmp_to_key(compare)
