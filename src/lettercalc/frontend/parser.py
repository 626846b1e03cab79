from .ast_expressions import Binary, Expression, Literal, Unary
from .errors import ExpressionSyntaxError
from .lexer import tokenize
from .tokens import Token, TokenKind, operator_for

MAX_NESTING_DEPTH = 256


class Parser:
    """Recursive-descent parser over a token list ending in END.

    expression         := primary_expression (operator primary_expression)*
    primary_expression := NUMBER
                        | LPAREN expression RPAREN
                        | MINUS primary_expression

    All binary operators share one precedence level and associate to the left.
    """

    def __init__(
        self, tokens: list[Token], max_depth: int = MAX_NESTING_DEPTH
    ) -> None:
        self._tokens = tokens
        self._current = 0
        self._depth = 0
        self._max_depth = max_depth

    def parse(self) -> Expression:
        ast = self.expression()
        self.assert_next("END")
        return ast

    def expression(self) -> Expression:
        expr = self.primary_expression()

        while True:
            op = operator_for(self.peek())
            if op is None:
                break
            self.advance()
            right = self.primary_expression()
            expr = Binary(expr, right, op)

        return expr

    def primary_expression(self) -> Expression:
        token = self.advance()

        if token.kind == "NUMBER":
            assert token.value is not None
            return Literal(token.value)

        if token.kind == "LPAREN":
            self._enter(token)
            expr = self.expression()
            self.assert_next("RPAREN")
            self._depth -= 1
            return expr

        if token.kind == "MINUS":
            self._enter(token)
            expr = self.primary_expression()
            self._depth -= 1
            return Unary("neg", expr)

        if token.kind == "END":
            raise ExpressionSyntaxError.parse("Unexpected end of input")

        raise ExpressionSyntaxError.parse(
            f"Unexpected token {token} at position {token.pos}"
        )

    def assert_next(self, kind: TokenKind) -> Token:
        token = self.advance()
        if token.kind == kind:
            return token

        if token.kind == "END":
            raise ExpressionSyntaxError.parse(
                f"Unexpected end of input, expected {kind}"
            )

        raise ExpressionSyntaxError.parse(
            f"Expected {kind} but found {token} at position {token.pos}"
        )

    def peek(self) -> Token:
        if self._current >= len(self._tokens):
            raise ExpressionSyntaxError.parse("Unexpected end of input")
        return self._tokens[self._current]

    def advance(self) -> Token:
        token = self.peek()
        self._current += 1
        return token

    def _enter(self, token: Token) -> None:
        self._depth += 1
        if self._depth > self._max_depth:
            raise ExpressionSyntaxError.parse(
                f"Maximum nesting depth of {self._max_depth} exceeded at position {token.pos}"
            )


def parse(tokens: list[Token], max_depth: int = MAX_NESTING_DEPTH) -> Expression:
    return Parser(tokens, max_depth).parse()


def parse_source(source: str) -> Expression:
    return parse(tokenize(source))
