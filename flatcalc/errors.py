from dataclasses import dataclass


class CalculatorError(Exception):
    """Base class for everything that can go wrong while evaluating one line."""

    @property
    def message(self) -> str:
        return str(self)


@dataclass
class ResourceExhaustedError(CalculatorError):
    errmsg: str = "Memory allocation error"

    def __str__(self) -> str:
        return self.errmsg
