import logging
from dataclasses import dataclass

from flatcalc.errors import CalculatorError
from flatcalc.tokenizer import Token, TokenRole, untokenize
from flatcalc.utils import PrintableEnum

logger = logging.getLogger(__name__)


@dataclass
class ParserError(CalculatorError):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    @property
    def message(self) -> str:
        return self.errmsg

    @property
    def token(self) -> Token | None:
        if self.error_token_idx < len(self.tokens):
            return self.tokens[self.error_token_idx]
        return None

    def __str__(self) -> str:
        parsed_tokens = self.tokens[: self.error_token_idx]
        filler_whitespace = " " * len(untokenize(parsed_tokens)) + (" " if parsed_tokens else "")
        return "\n".join([f"Parser error: {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


class InvalidOperandError(ParserError):
    pass


class InvalidOperatorError(ParserError):
    pass


class MissingFinalOperandError(ParserError):
    pass


class Operator(PrintableEnum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value


OPERAND_CHARS = frozenset("0123456789.")
OPERATOR_SYMBOLS = frozenset(op.symbol for op in Operator)


@dataclass
class FlatExpression:
    """Operands and the operators between them; operator i joins operands i and i + 1."""

    operands: list[float]
    operators: list[Operator]

    def __str__(self) -> str:
        parts = [_format_operand(self.operands[0])] if self.operands else []
        for op, operand in zip(self.operators, self.operands[1:]):
            parts.extend([op.symbol, _format_operand(operand)])
        return " ".join(parts)


def _format_operand(value: float) -> str:
    return f"{value:g}"


def is_valid_operand(lexeme: str) -> bool:
    return bool(lexeme) and all(c in OPERAND_CHARS for c in lexeme) and lexeme.count(".") <= 1


def is_valid_operator(lexeme: str) -> bool:
    return len(lexeme) == 1 and lexeme in OPERATOR_SYMBOLS


def operand_value(lexeme: str) -> float:
    # a lone "." passes validation and reads as zero
    if lexeme == ".":
        return 0.0
    return float(lexeme)


def parse(tokens: list[Token]) -> FlatExpression:
    operands: list[float] = []
    operators: list[Operator] = []
    for i, token in enumerate(tokens):
        if token.role is TokenRole.OPERAND:
            if not is_valid_operand(token.lexeme):
                raise InvalidOperandError(f"Invalid operand: {token.lexeme}", tokens=tokens, error_token_idx=i)
            operands.append(operand_value(token.lexeme))
        else:
            if not is_valid_operator(token.lexeme):
                raise InvalidOperatorError(f"Invalid operator: {token.lexeme}", tokens=tokens, error_token_idx=i)
            operators.append(Operator(token.lexeme))

    if len(operands) - len(operators) != 1:
        raise MissingFinalOperandError("Missing last operand", tokens=tokens, error_token_idx=len(tokens))

    logger.debug("Parsed %d operands and %d operators", len(operands), len(operators))
    return FlatExpression(operands=operands, operators=operators)
