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

from .tokenizer import Token, TokenKind, tokenize, tokenize_list
from .infix2postfix import infix2postfix, infix2postfix_tokens
from .infix2prefix import infix2prefix, infix2prefix_tokens
from .evaluate import (
    BinaryOp,
    Leaf,
    build_postfix_tree,
    build_prefix_tree,
    evaluate_postfix,
    evaluate_prefix,
    evaluate_tree,
)
from .compare import compare, results_match
from .config import ConversionMode
from .errors import (
    ConversionError,
    EvaluationError,
    ExprConvError,
    RecordFileError,
    StructuralEvaluationError,
    UnsupportedOperatorError,
)
from .pipeline import ConversionResult, ExpressionRecord, process_batch, process_record

__version__ = "0.0.1"

__all__ = [
    "Token",
    "TokenKind",
    "tokenize",
    "tokenize_list",
    "infix2postfix",
    "infix2postfix_tokens",
    "infix2prefix",
    "infix2prefix_tokens",
    "BinaryOp",
    "Leaf",
    "build_postfix_tree",
    "build_prefix_tree",
    "evaluate_postfix",
    "evaluate_prefix",
    "evaluate_tree",
    "compare",
    "results_match",
    "ConversionMode",
    "ConversionError",
    "EvaluationError",
    "ExprConvError",
    "RecordFileError",
    "StructuralEvaluationError",
    "UnsupportedOperatorError",
    "ConversionResult",
    "ExpressionRecord",
    "process_batch",
    "process_record",
]
