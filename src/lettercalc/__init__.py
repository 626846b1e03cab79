from .frontend.errors import ExpressionSyntaxError
from .frontend.lexer import tokenize
from .frontend.parser import parse
from .runtime.core import EvaluationError, RuntimeContext
from .runtime.evaluator import evaluate
from .runtime.interpreter import evaluate_expression, run_for_cli

__all__ = [
    "EvaluationError",
    "ExpressionSyntaxError",
    "RuntimeContext",
    "evaluate",
    "evaluate_expression",
    "parse",
    "run_for_cli",
    "tokenize",
]
