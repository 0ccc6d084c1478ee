import math

DEFAULT_PRECISION = 10


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    if not math.isfinite(value):
        raise ValueError(f"Can't format non-finite value {value!r}")

    result = f"{value:.{precision}f}"
    if "." in result:
        # 2.5000000000 => 2.5, 4.0000000000 => 4
        result = result.rstrip("0")
        result = result.removesuffix(".")

    # values that round to zero from below would otherwise print as -0
    if result == "-0":
        result = "0"
    return result


def format_result(value: float, precision: int = DEFAULT_PRECISION) -> str:
    return f"Result: {format_number(value, precision=precision)}"
