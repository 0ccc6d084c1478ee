import logging
from typing import Optional

from flatcalc.config import CalculatorConfig
from flatcalc.errors import CalculatorError, ResourceExhaustedError
from flatcalc.formatter import format_result
from flatcalc.parser import parse
from flatcalc.runtime import EvaluationMode, evaluate
from flatcalc.tokenizer import tokenize

logger = logging.getLogger(__name__)


def calculate(line: str, mode: EvaluationMode = EvaluationMode.STANDARD) -> float:
    """Runs a single line through the whole pipeline.

    Raises a CalculatorError subclass for malformed input, division by zero or
    running out of memory; nothing is kept between calls.
    """
    try:
        tokens = tokenize(line)
        expression = parse(tokens)
        return evaluate(expression, mode=mode)
    except MemoryError as e:
        raise ResourceExhaustedError() from e


def evaluate_line(line: str, config: Optional[CalculatorConfig] = None) -> str:
    config = config or CalculatorConfig()
    try:
        value = calculate(line, mode=config.mode)
    except CalculatorError as e:
        logger.info("Rejected %r: %s", line, e.message)
        return e.message
    return format_result(value, precision=config.precision)
