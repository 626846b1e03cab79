import operator
from typing import Callable

from ..frontend.ast_expressions import Binary, BinaryOp, Expression, Literal, Unary
from ..writer import indented_output
from .core import EvaluationError, RuntimeContext, check_int64


def _truncating_div(left: int, right: int) -> int:
    if right == 0:
        raise EvaluationError("Division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_binary_ops: dict[BinaryOp, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def evaluate(expr: Expression, context: RuntimeContext | None = None) -> int:
    context = context or RuntimeContext()
    return _eval(expr, context)


def _eval(expr: Expression, context: RuntimeContext) -> int:
    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, Unary):
        if expr.op != "neg":
            raise ValueError(f"Unsupported unary operator: {expr.op!r}")
        with indented_output(context.writer):
            value = _eval(expr.expr, context)
        result = check_int64(-value)
        context.writer.debugln(f"[-({value}) => {result}]")
        return result

    if isinstance(expr, Binary):
        return _eval_binary(expr, context)

    raise TypeError(f"Unsupported expression type: {type(expr).__name__}")


def _eval_binary(expr: Binary, context: RuntimeContext) -> int:
    # Chains lean left, so walk the left spine instead of recursing into it.
    spine: list[Binary] = []
    node: Expression = expr
    while isinstance(node, Binary):
        spine.append(node)
        node = node.left

    with indented_output(context.writer):
        result = _eval(node, context)
        for binary in reversed(spine):
            operation = _binary_ops.get(binary.op)
            if operation is None:
                raise ValueError(f"Unsupported binary operator: {binary.op!r}")
            right_value = _eval(binary.right, context)
            left_value = result
            result = check_int64(operation(left_value, right_value))
            context.writer.debugln(
                f"[({left_value}) {binary.op} ({right_value}) => {result}]"
            )

    return result
