from typing import Optional


class ExprConvError(Exception):
    """Base error, optionally naming the expression it was raised for."""

    def __init__(self, message: str, expression: Optional[str] = None):
        self.expression = expression
        if expression is not None:
            super().__init__(f"{message}: '{expression}'")
        else:
            super().__init__(message)


class ConversionError(ExprConvError):
    """Raised by strict-mode conversion on malformed infix input."""


class EvaluationError(ExprConvError):
    """Base class for failures while building or reducing an expression tree."""


class StructuralEvaluationError(EvaluationError):
    pass


class UnsupportedOperatorError(EvaluationError):
    def __init__(self, operator: str, expression: Optional[str] = None):
        self.operator = operator
        super().__init__(f"Unsupported operator '{operator}'", expression)


class RecordFileError(ExprConvError):
    pass
