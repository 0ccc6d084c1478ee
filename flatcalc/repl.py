import logging
from typing import Callable, Optional, Sequence

from flatcalc.config import CalculatorConfig, parse_config
from flatcalc.errors import CalculatorError
from flatcalc.formatter import format_result
from flatcalc.session import calculate, evaluate_line

logger = logging.getLogger(__name__)

BANNER = "\n".join(
    [
        "Enter an expression to be evaluated!",
        "Valid operators are + - * /",
        "Valid operands are integers or floating point numbers.",
        "Operands and operators must be space-separated.",
        "Type {quit_command} and hit enter when you are finished.",
    ]
)


def run_repl(
    config: CalculatorConfig,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    if config.show_banner:
        write(BANNER.format(quit_command=config.quit_command))

    while True:
        write("")
        try:
            line = read_line(config.prompt)
        except EOFError:
            logger.debug("End of input")
            break

        if line == config.quit_command:
            break

        write(evaluate_line(line, config))

    write("Goodbye!")


def run_once(config: CalculatorConfig, write: Callable[[str], None] = print) -> int:
    assert config.expression is not None
    try:
        value = calculate(config.expression, mode=config.mode)
    except CalculatorError as e:
        write(e.message)
        return 1
    write(format_result(value, precision=config.precision))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_config(argv)
    config.configure_logging()
    if config.expression is not None:
        return run_once(config)
    run_repl(config)
    return 0
