from dataclasses import dataclass, field

from ..frontend.tokens import INT64_MAX, INT64_MIN
from ..writer import IndentingWriter


class EvaluationError(ArithmeticError):
    """Raised when an expression tree cannot be reduced to a 64-bit integer."""


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)


def check_int64(value: int) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise EvaluationError(
            f"Integer overflow: {value} is outside the 64-bit signed range"
        )
    return value
