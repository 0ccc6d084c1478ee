import pytest

from flatcalc.parser import (
    FlatExpression,
    InvalidOperandError,
    InvalidOperatorError,
    MissingFinalOperandError,
    Operator,
    ParserError,
    is_valid_operand,
    is_valid_operator,
    parse,
)
from flatcalc.tokenizer import tokenize


@pytest.mark.parametrize(
    "lexeme, is_valid",
    [
        pytest.param("0", True),
        pytest.param("123", True),
        pytest.param("1.5", True),
        pytest.param(".5", True),
        pytest.param("5.", True),
        pytest.param(".", True),
        pytest.param("", False),
        pytest.param("1.2.3", False),
        pytest.param("..", False),
        pytest.param("x", False),
        pytest.param("-1", False),
        pytest.param("1e5", False),
        pytest.param("١٢", False),  # non-ASCII digits
    ],
)
def test_is_valid_operand(lexeme: str, is_valid: bool) -> None:
    assert is_valid_operand(lexeme) is is_valid


@pytest.mark.parametrize(
    "lexeme, is_valid",
    [
        pytest.param("+", True),
        pytest.param("-", True),
        pytest.param("*", True),
        pytest.param("/", True),
        pytest.param("", False),
        pytest.param("++", False),
        pytest.param("^", False),
        pytest.param("$", False),
        pytest.param("**", False),
    ],
)
def test_is_valid_operator(lexeme: str, is_valid: bool) -> None:
    assert is_valid_operator(lexeme) is is_valid


def test_parse() -> None:
    assert parse(tokenize("1 + 2.5 / .")) == FlatExpression(
        operands=[1.0, 2.5, 0.0],
        operators=[Operator.ADD, Operator.DIV],
    )


@pytest.mark.parametrize(
    "code, error_type, errmsg, error_token_idx",
    [
        pytest.param("2 + x", InvalidOperandError, "Invalid operand: x", 2),
        pytest.param("x + 2", InvalidOperandError, "Invalid operand: x", 0),
        pytest.param("2 $ 3", InvalidOperatorError, "Invalid operator: $", 1),
        pytest.param("2 ++ 3", InvalidOperatorError, "Invalid operator: ++", 1),
        pytest.param("2 3", InvalidOperatorError, "Invalid operator: 3", 1),
        pytest.param("1.2.3 + 1", InvalidOperandError, "Invalid operand: 1.2.3", 0),
        pytest.param("2 +", MissingFinalOperandError, "Missing last operand", 2),
        pytest.param("", MissingFinalOperandError, "Missing last operand", 0),
    ],
)
def test_parse_errors(code: str, error_type: type[ParserError], errmsg: str, error_token_idx: int) -> None:
    with pytest.raises(error_type) as exc_info:
        parse(tokenize(code))
    assert exc_info.value.message == errmsg
    assert exc_info.value.error_token_idx == error_token_idx


def test_first_invalid_token_wins() -> None:
    with pytest.raises(InvalidOperandError) as exc_info:
        parse(tokenize("a $ b"))
    assert exc_info.value.token is not None
    assert exc_info.value.token.lexeme == "a"


def test_parser_error_points_at_token() -> None:
    with pytest.raises(ParserError) as exc_info:
        parse(tokenize("12 + 3 $ 4"))
    assert str(exc_info.value) == "\n".join(
        [
            "Parser error: Invalid operator: $",
            "12 + 3 $ 4",
            "       ^",
        ]
    )


def test_expression_str() -> None:
    assert str(parse(tokenize("1 + 2.5 * 3"))) == "1 + 2.5 * 3"
