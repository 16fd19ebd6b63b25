"""Default settings for conversion, comparison and batch I/O."""

import os
from enum import StrEnum


class ConversionMode(StrEnum):
    """
    How the notation converters treat malformed infix input.

    Attributes:
        LENIENT: Unbalanced parentheses are silently tolerated. (default)
        STRICT: Malformed input raises ConversionError.
    """

    LENIENT = "lenient"
    STRICT = "strict"


COMPARE_CONFIG = {
    "epsilon": 1e-6,
}

CONVERSION_CONFIG = {
    "mode": ConversionMode.LENIENT,
    "separator": "",  # "342*+" rather than "3 4 2 * +"
}

IO_CONFIG = {
    "input_path": os.path.join("Data", "Project 2_INFO_5101.csv"),
    "output_path": os.path.join("Data", "expressions.xml"),
    "max_workers": None,
}

REPORT_CONFIG = {
    "width": 80,
    "sno_width": 4,
    "expr_width": 20,
    "result_width": 10,
    "match_width": 5,
}


def validate_config():
    assert COMPARE_CONFIG["epsilon"] > 0, "epsilon must be positive"
    assert CONVERSION_CONFIG["mode"] in set(ConversionMode), "unknown conversion mode"
    assert isinstance(CONVERSION_CONFIG["separator"], str), "separator must be a string"
    workers = IO_CONFIG["max_workers"]
    assert workers is None or workers >= 1, "max_workers must be None or >= 1"
    assert all(v > 0 for v in REPORT_CONFIG.values()), "report widths must be positive"
