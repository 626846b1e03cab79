from dataclasses import dataclass, field
from typing import Literal

from .ast_expressions import BinaryOp

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Kinds double as the terminal names in grammar.lark.
TokenKind = Literal[
    "PLUS",
    "MINUS",
    "STAR",
    "SLASH",
    "LPAREN",
    "RPAREN",
    "NUMBER",
    "END",
]


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    value: int | None = None
    pos: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if self.kind == "NUMBER":
            return f"NUMBER({self.value})"
        return self.kind


_binary_ops: dict[TokenKind, BinaryOp] = {
    "PLUS": "+",
    "MINUS": "-",
    "STAR": "*",
    "SLASH": "/",
}


def operator_for(token: Token) -> BinaryOp | None:
    """Binary operator a token stands for, or None if it is not an operator.

    MINUS maps to subtraction here; negation is decided by the parser from
    the token's position.
    """
    return _binary_ops.get(token.kind)
