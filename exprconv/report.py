import math
import sys
from typing import Iterable, Optional, TextIO

from .config import REPORT_CONFIG
from .pipeline import ConversionResult


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def format_summary(results: Iterable[ConversionResult]) -> str:
    """
    Render results as the fixed-width summary table.

    Cells wider than their column are not truncated.
    """
    width = REPORT_CONFIG["width"]
    sno_w = REPORT_CONFIG["sno_width"]
    expr_w = REPORT_CONFIG["expr_width"]
    res_w = REPORT_CONFIG["result_width"]
    match_w = REPORT_CONFIG["match_width"]
    title = "Summary Report"

    lines = [
        "=" * width,
        title.center(width).rstrip(),
        "=" * width,
        f"| {'Sno':<{sno_w}}| {'Infix':<{expr_w}}| {'PostFix':<{expr_w}}| "
        f"{'Prefix':<{expr_w}}| {'Prefix Res':<{res_w}}| {'PostFix Res':<{res_w}}| "
        f"{'Match':<{match_w}}|",
        "|" + "|".join("-" * w for w in (sno_w, expr_w, expr_w, expr_w, res_w, res_w, match_w)) + "|",
    ]
    for r in results:
        lines.append(
            f"| {r.sno:<{sno_w}}| {r.infix:<{expr_w}}| {r.postfix:<{expr_w}}| "
            f"{r.prefix:<{expr_w}}| {format_number(r.prefix_evaluation):<{res_w}}| "
            f"{format_number(r.postfix_evaluation):<{res_w}}| {str(r.match):<{match_w}}|"
        )
    lines.append("=" * width)
    return "\n".join(lines)


def print_summary(results: Iterable[ConversionResult], file: Optional[TextIO] = None):
    file = file if file is not None else sys.stdout
    print(file=file)
    print(format_summary(results), file=file)
