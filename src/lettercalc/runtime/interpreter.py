import sys
from typing import TextIO

from ..frontend.errors import ExpressionSyntaxError
from ..frontend.lexer import tokenize
from ..frontend.parser import parse
from .core import EvaluationError, RuntimeContext
from .evaluator import evaluate


def evaluate_expression(source: str, context: RuntimeContext | None = None) -> int:
    """Tokenize, parse and evaluate `source`.

    Raises ExpressionSyntaxError for input that does not tokenize or parse,
    and EvaluationError for division by zero or 64-bit overflow.
    """
    tokens = tokenize(source)
    ast = parse(tokens)
    return evaluate(ast, context)


def run_for_cli(
    source: str,
    context: RuntimeContext | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int | None:
    out_stream = stdout if stdout is not None else sys.stdout
    err_stream = stderr if stderr is not None else sys.stderr

    try:
        result = evaluate_expression(source, context)
    except ExpressionSyntaxError as error:
        print(error, file=err_stream)
        return None
    except EvaluationError as error:
        print(f"Runtime error: {error}", file=err_stream)
        return None

    print(f"Input: {source} => Output: {result}", file=out_stream)
    return result
