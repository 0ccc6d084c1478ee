import argparse
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from flatcalc.formatter import DEFAULT_PRECISION
from flatcalc.runtime import EvaluationMode

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@dataclass
class CalculatorConfig:
    prompt: str = "Input expression: "
    quit_command: str = "quit"
    precision: int = DEFAULT_PRECISION
    mode: EvaluationMode = EvaluationMode.STANDARD
    show_banner: bool = True
    log_level: str = "WARNING"
    expression: Optional[str] = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CalculatorConfig":
        return cls(
            quit_command=args.quit_command,
            precision=args.precision,
            mode=EvaluationMode[args.mode.upper()],
            show_banner=not args.no_banner,
            log_level=args.log_level,
            expression=args.expression,
        )

    def configure_logging(self) -> None:
        logging.basicConfig(level=self.log_level, format="%(levelname)s %(name)s: %(message)s")


def _precision(value: str) -> int:
    try:
        precision = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if not 0 <= precision <= 50:
        raise argparse.ArgumentTypeError(f"precision must be between 0 and 50, got {precision}")
    return precision


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flatcalc",
        description="Evaluate space-separated arithmetic expressions such as '2 + 3 * 4'",
    )
    parser.add_argument("-e", "--expression", help="Evaluate a single expression and exit")
    parser.add_argument(
        "--mode",
        choices=[m.name.lower() for m in EvaluationMode],
        default=EvaluationMode.STANDARD.name.lower(),
        help="standard: regular precedence; compat: classic four-pass evaluation",
    )
    parser.add_argument(
        "--precision",
        type=_precision,
        default=DEFAULT_PRECISION,
        help="Maximum number of fractional digits in results",
    )
    parser.add_argument("--quit-command", default="quit", help="Line that ends the interactive session")
    parser.add_argument("--no-banner", action="store_true", help="Don't print the greeting")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")
    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> CalculatorConfig:
    args = build_arg_parser().parse_args(argv)
    return CalculatorConfig.from_args(args)
