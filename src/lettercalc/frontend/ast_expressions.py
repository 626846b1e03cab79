from dataclasses import dataclass
from typing import Literal as TypingLiteral

BinaryOp = TypingLiteral["+", "-", "*", "/"]
UnaryOp = TypingLiteral["neg"]
Operator = BinaryOp | UnaryOp


class Expression:
    pass


@dataclass(frozen=True, slots=True)
class Literal(Expression):
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Unary(Expression):
    op: UnaryOp
    expr: Expression

    def __str__(self) -> str:
        return f"-({self.expr})"


@dataclass(frozen=True, slots=True)
class Binary(Expression):
    left: Expression
    right: Expression
    op: BinaryOp

    def __str__(self) -> str:
        # Chains lean left, so render the left spine without recursing into it.
        spine: list[Binary] = []
        node: Expression = self
        while isinstance(node, Binary):
            spine.append(node)
            node = node.left

        parts = ["(" * len(spine), str(node)]
        for binary in reversed(spine):
            parts.append(f" {binary.op} {binary.right})")
        return "".join(parts)
