from functools import lru_cache
from importlib.resources import files
from typing import cast

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from .errors import ExpressionSyntaxError
from .tokens import INT64_MAX, Token, TokenKind


def _load_grammar_text() -> str:
    grammar_file = files("lettercalc.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_lark() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="tokens", parser="lalr", lexer="basic")


def tokenize(source: str) -> list[Token]:
    """Split `source` into tokens, always terminated by a single END token.

    The scan stops at the first character outside the alphabet; no partial
    token list is returned.
    """
    tokens: list[Token] = []
    try:
        for lark_token in get_lark().lex(source):
            tokens.append(
                _convert(lark_token.type, str(lark_token), lark_token.start_pos)
            )
    except UnexpectedCharacters as error:
        raise ExpressionSyntaxError.lexicon(
            f"Unrecognized character {error.char!r} at position {error.pos_in_stream}"
        ) from error

    tokens.append(Token("END", pos=len(source)))
    return tokens


def _convert(kind: str, text: str, pos: int | None) -> Token:
    start = pos or 0
    if kind != "NUMBER":
        return Token(cast(TokenKind, kind), pos=start)

    value = int(text)
    if value > INT64_MAX:
        raise ExpressionSyntaxError.lexicon(
            f"Number {text} at position {start} does not fit in a 64-bit signed integer"
        )
    return Token("NUMBER", value, start)
