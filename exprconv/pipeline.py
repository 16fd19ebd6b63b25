import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Iterable, Optional

from .compare import results_match
from .config import CONVERSION_CONFIG, IO_CONFIG, ConversionMode
from .errors import ConversionError, EvaluationError
from .evaluate import evaluate_postfix, evaluate_prefix
from .infix2postfix import infix2postfix_tokens
from .infix2prefix import infix2prefix_tokens
from .tokenizer import render

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExpressionRecord:
    sno: int
    infix: str


@dataclass
class ConversionResult:
    sno: int
    infix: str
    postfix: str
    prefix: str
    prefix_evaluation: float
    postfix_evaluation: float
    match: bool
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def process_record(
    record: ExpressionRecord,
    mode: Optional[ConversionMode] = None,
    separator: Optional[str] = None,
    epsilon: Optional[float] = None,
) -> ConversionResult:
    """
    Convert one infix expression both ways, evaluate both forms and compare.

    Evaluation failures are logged and recorded on the result, and the failed
    side evaluates to nan. Nothing is raised for a bad expression.
    """
    if separator is None:
        separator = CONVERSION_CONFIG["separator"]
    errors: list[str] = []

    try:
        postfix_tokens = infix2postfix_tokens(record.infix, mode)
        prefix_tokens = infix2prefix_tokens(record.infix, mode)
    except ConversionError as e:
        logger.warning("Expression %s: conversion failed: %s", record.sno, e)
        errors.append(str(e))
        return ConversionResult(
            record.sno, record.infix, "", "", math.nan, math.nan,
            results_match(math.nan, math.nan, epsilon), errors,
        )

    prefix = render(prefix_tokens, separator)
    postfix = render(postfix_tokens, separator)

    try:
        prefix_value = evaluate_prefix(prefix_tokens, prefix)
    except EvaluationError as e:
        logger.warning("Expression %s: error evaluating prefix expression: %s", record.sno, e)
        errors.append(str(e))
        prefix_value = math.nan

    try:
        postfix_value = evaluate_postfix(postfix_tokens, postfix)
    except EvaluationError as e:
        logger.warning("Expression %s: error evaluating postfix expression: %s", record.sno, e)
        errors.append(str(e))
        postfix_value = math.nan

    match = results_match(prefix_value, postfix_value, epsilon)
    logger.debug(
        "Expression %s: %s -> prefix %s = %s, postfix %s = %s, match %s",
        record.sno, record.infix, prefix, prefix_value, postfix, postfix_value, match,
    )
    return ConversionResult(
        record.sno, record.infix, postfix, prefix, prefix_value, postfix_value, match, errors
    )


def process_batch(
    records: Iterable[ExpressionRecord],
    mode: Optional[ConversionMode] = None,
    separator: Optional[str] = None,
    epsilon: Optional[float] = None,
    max_workers: Optional[int] = None,
) -> list[ConversionResult]:
    """
    Process records and return their results in input order.

    Args:
        records: ``(sno, infix)`` records.
        mode: Conversion mode for every record.
        separator: Joins tokens in the rendered prefix/postfix strings.
        epsilon: Match tolerance.
        max_workers: Thread count. ``None`` or 1 processes sequentially.
    """
    if max_workers is None:
        max_workers = IO_CONFIG["max_workers"]
    worker = partial(process_record, mode=mode, separator=separator, epsilon=epsilon)
    records = list(records)
    logger.info("Processing %d expressions", len(records))

    if max_workers is None or max_workers <= 1:
        results = [worker(record) for record in records]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(worker, records))

    failed = sum(1 for result in results if not result.ok)
    if failed:
        logger.warning("%d of %d expressions had errors", failed, len(results))
    return results
