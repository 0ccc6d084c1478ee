import pytest

from flatcalc.tokenizer import Token, TokenRole, tokenize, untokenize


def test_roles_alternate() -> None:
    assert tokenize("1 + 2 * 3") == [
        Token(lexeme="1", role=TokenRole.OPERAND, index=0),
        Token(lexeme="+", role=TokenRole.OPERATOR, index=1),
        Token(lexeme="2", role=TokenRole.OPERAND, index=2),
        Token(lexeme="*", role=TokenRole.OPERATOR, index=3),
        Token(lexeme="3", role=TokenRole.OPERAND, index=4),
    ]


@pytest.mark.parametrize(
    "line, expected_lexemes",
    [
        pytest.param("", []),
        pytest.param("   ", []),
        pytest.param("\n", []),
        pytest.param("42\n", ["42"]),
        pytest.param("1 + 2\r\n", ["1", "+", "2"]),
        pytest.param("  1   +\t2  ", ["1", "+", "2"]),
        pytest.param("1+2", ["1+2"]),
    ],
)
def test_tokenize_lexemes(line: str, expected_lexemes: list[str]) -> None:
    assert [t.lexeme for t in tokenize(line)] == expected_lexemes


def test_untokenize() -> None:
    assert untokenize(tokenize(" 1  +   2 ")) == "1 + 2"


def test_token_str() -> None:
    assert str(tokenize("7")[0]) == "<operand>7"
