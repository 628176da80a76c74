"""
Arithmetic for ``POST /api/calculate``.

Operands must already be JSON numbers; strings such as ``"5"`` and
booleans are rejected rather than coerced.
"""

import math
import operator
from typing import Any, Callable, Dict, Union

from ..core.errors import ValidationError

Number = Union[int, float]

OPERATIONS: Dict[str, Callable[[Number, Number], Number]] = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
    "divide": operator.truediv,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _type_name(value: Any) -> str:
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


# Integral floats at or above this magnitude keep exponent notation.
EXPONENT_THRESHOLD = 1e21


def _collapse(value: Number) -> Number:
    if isinstance(value, float) and value.is_integer() and abs(value) < EXPONENT_THRESHOLD:
        return int(value)
    return value


def _format(value: Number) -> str:
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return str(_collapse(value))


class CalculatorService:
    """Dispatches an operation name onto two numeric operands."""

    @staticmethod
    def calculate(operation: Any, a: Any, b: Any) -> Dict[str, Any]:
        if not _is_number(a) or not _is_number(b):
            raise ValidationError(
                "a and b must be numbers",
                received={"a": _type_name(a), "b": _type_name(b)},
            )
        func = OPERATIONS.get(operation) if isinstance(operation, str) else None
        if func is None:
            raise ValidationError("Unknown operation", validOperations=list(OPERATIONS))
        if operation == "divide" and b == 0:
            raise ValidationError("Cannot divide by zero")

        try:
            result = _collapse(func(a, b))
        except OverflowError:
            raise ValidationError("Result is too large", tip="Try smaller operands") from None
        return {
            "operation": operation,
            "a": a,
            "b": b,
            "result": result,
            "formula": f"{_format(a)} {operation} {_format(b)} = {_format(result)}",
        }
