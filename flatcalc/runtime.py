import enum
import logging
import math
import operator
import sys
from dataclasses import dataclass
from typing import Callable, Optional

from flatcalc.errors import CalculatorError
from flatcalc.parser import FlatExpression, Operator
from flatcalc.utils import PrintableEnum

logger = logging.getLogger(__name__)

DIVISION_EPSILON = sys.float_info.epsilon


@dataclass
class CalcRuntimeError(CalculatorError):
    errmsg: str

    def __str__(self) -> str:
        return self.errmsg


@dataclass
class DivideByZeroError(CalcRuntimeError):
    errmsg: str = "Divide by zero error"


@dataclass
class ResultOutOfRangeError(CalcRuntimeError):
    errmsg: str = "Result is out of range"


class EvaluationMode(PrintableEnum):
    """How operators are grouped into passes and how results are spread over operand slots.

    STANDARD evaluates {*, /} then {+, -}, each tier left to right, and writes every
    intermediate result only over the run of operands it was folded from.

    COMPAT reproduces the classic four-pass calculator: *, then /, then +, then -,
    writing every intermediate result over all operands touched so far. It differs
    from STANDARD on inputs such as "2 * 3 - 4 * 5" (0 instead of -14).
    """

    STANDARD = enum.auto()
    COMPAT = enum.auto()


OperatorImpl = Callable[[float, float], float]


def _divide(a: float, b: float) -> float:
    if abs(b) < DIVISION_EPSILON:
        raise DivideByZeroError()
    return a / b


OPERATOR_IMPLS: dict[Operator, OperatorImpl] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: _divide,
}

PRECEDENCE_PASSES: dict[EvaluationMode, list[frozenset[Operator]]] = {
    EvaluationMode.STANDARD: [
        frozenset({Operator.MUL, Operator.DIV}),
        frozenset({Operator.ADD, Operator.SUB}),
    ],
    EvaluationMode.COMPAT: [
        frozenset({Operator.MUL}),
        frozenset({Operator.DIV}),
        frozenset({Operator.ADD}),
        frozenset({Operator.SUB}),
    ],
}


def apply_operator(a: float, b: float, op: Operator) -> float:
    try:
        result = OPERATOR_IMPLS[op](a, b)
    except OverflowError as e:
        raise ResultOutOfRangeError() from e
    if not math.isfinite(result):
        raise ResultOutOfRangeError()
    return result


def evaluate(expression: FlatExpression, mode: EvaluationMode = EvaluationMode.STANDARD) -> float:
    if len(expression.operands) != len(expression.operators) + 1:
        raise CalcRuntimeError(
            f"Malformed expression: {len(expression.operands)} operands for {len(expression.operators)} operators"
        )
    if not all(math.isfinite(v) for v in expression.operands):
        raise ResultOutOfRangeError()

    operands = list(expression.operands)
    # consumed operators are replaced with None so they are never applied twice
    pending: list[Optional[Operator]] = list(expression.operators)
    folded = [False] * len(operands)

    for operator_class in PRECEDENCE_PASSES[mode]:
        while True:
            op_idx = _first_pending(pending, operator_class)
            if op_idx is None:
                break
            op = pending[op_idx]
            assert op is not None
            result = apply_operator(operands[op_idx], operands[op_idx + 1], op)
            pending[op_idx] = None

            if mode is EvaluationMode.COMPAT:
                folded[op_idx] = folded[op_idx + 1] = True
                slots: range | list[int] = [j for j, is_folded in enumerate(folded) if is_folded]
            else:
                slots = _folded_segment(pending, op_idx)
            for j in slots:
                operands[j] = result
            logger.debug("Applied %s at %d -> %r, operands: %r", op, op_idx, result, operands)

    return operands[0]


def _first_pending(pending: list[Optional[Operator]], operator_class: frozenset[Operator]) -> Optional[int]:
    for i, op in enumerate(pending):
        if op is not None and op in operator_class:
            return i
    return None


def _folded_segment(pending: list[Optional[Operator]], op_idx: int) -> range:
    """Operand slots joined to the operator at op_idx through already consumed operators."""
    start = op_idx
    while start > 0 and pending[start - 1] is None:
        start -= 1
    end = op_idx + 1
    while end < len(pending) and pending[end] is None:
        end += 1
    return range(start, end + 1)
