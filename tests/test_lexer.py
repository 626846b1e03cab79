import pytest

from lettercalc.frontend.errors import ExpressionSyntaxError
from lettercalc.frontend.lexer import tokenize
from lettercalc.frontend.tokens import INT64_MAX, Token


def kinds(source: str) -> list[str]:
    return [token.kind for token in tokenize(source)]


# ===== Alphabet =====
def test_each_letter_maps_to_one_token() -> None:
    assert kinds("abcdef") == [
        "PLUS",
        "MINUS",
        "STAR",
        "SLASH",
        "LPAREN",
        "RPAREN",
        "END",
    ]


def test_empty_input_yields_only_end() -> None:
    assert tokenize("") == [Token("END")]


def test_whitespace_is_skipped() -> None:
    assert kinds(" 3 \ta\n 2 ") == ["NUMBER", "PLUS", "NUMBER", "END"]
    assert tokenize("   ") == [Token("END")]


def test_vertical_tab_and_form_feed_are_whitespace() -> None:
    assert kinds("1\x0ba\x0c2") == ["NUMBER", "PLUS", "NUMBER", "END"]


def test_end_is_appended_exactly_once() -> None:
    tokens = tokenize("3a2c4")
    assert tokens[-1] == Token("END")
    assert [token.kind for token in tokens].count("END") == 1


# ===== Numbers =====
@pytest.mark.parametrize("source", ["0", "7", "42", "500", "0012", str(INT64_MAX)])
def test_digit_run_is_a_single_number(source: str) -> None:
    assert tokenize(source) == [Token("NUMBER", int(source)), Token("END")]


def test_digit_runs_are_split_by_operators() -> None:
    tokens = tokenize("500a10b66c32")
    numbers = [token.value for token in tokens if token.kind == "NUMBER"]
    assert numbers == [500, 10, 66, 32]


def test_spaces_separate_numbers() -> None:
    assert tokenize("3 4") == [Token("NUMBER", 3), Token("NUMBER", 4), Token("END")]


def test_number_larger_than_int64_is_a_lexicon_error() -> None:
    with pytest.raises(ExpressionSyntaxError, match=r"64-bit") as info:
        tokenize(str(INT64_MAX + 1))
    assert info.value.level == "Lexicon"


# ===== Positions =====
def test_tokens_record_their_offsets() -> None:
    tokens = tokenize("12 a e3f")
    assert [token.pos for token in tokens] == [0, 3, 5, 6, 7, 8]


def test_positions_do_not_affect_equality() -> None:
    assert Token("PLUS", pos=0) == Token("PLUS", pos=9)
    assert Token("NUMBER", 1) != Token("NUMBER", 2)


# ===== Errors =====
@pytest.mark.parametrize("source", ["g", "3+2", "3ag", "x1", "1.5", "A"])
def test_unrecognized_character_is_a_lexicon_error(source: str) -> None:
    with pytest.raises(ExpressionSyntaxError) as info:
        tokenize(source)
    assert info.value.level == "Lexicon"
    assert "Unrecognized character" in info.value.message


def test_lexicon_error_names_character_and_position() -> None:
    with pytest.raises(ExpressionSyntaxError, match=r"'g' at position 3"):
        tokenize("3a2g4")


def test_scan_aborts_at_first_bad_character() -> None:
    with pytest.raises(ExpressionSyntaxError, match=r"'x'"):
        tokenize("1x2y")


# ===== Structure =====
def test_lexing_does_not_check_expression_structure() -> None:
    assert kinds("fa3eb") == ["RPAREN", "PLUS", "NUMBER", "LPAREN", "MINUS", "END"]
