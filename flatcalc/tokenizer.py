import enum
from dataclasses import dataclass

from flatcalc.utils import PrintableEnum


class TokenRole(PrintableEnum):
    OPERAND = enum.auto()
    OPERATOR = enum.auto()


@dataclass
class Token:
    lexeme: str
    role: TokenRole
    index: int

    def __str__(self) -> str:
        return f"<{self.role}>{self.lexeme}"


def role_at(index: int) -> TokenRole:
    # operands and operators alternate, starting with an operand
    return TokenRole.OPERAND if index % 2 == 0 else TokenRole.OPERATOR


def tokenize(line: str) -> list[Token]:
    line = line.removesuffix("\n").removesuffix("\r")
    return [Token(lexeme=lexeme, role=role_at(i), index=i) for i, lexeme in enumerate(line.split())]


def untokenize(tokens: list[Token]) -> str:
    return " ".join(t.lexeme for t in tokens)
