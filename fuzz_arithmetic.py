import math
import random
import warnings

from flatcalc.session import calculate

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return calculate(code)
    except Exception as e:
        return str(e)


if __name__ == "__main__":

    def generate_operand() -> str:
        if random.random() < 0.5:
            return str(random.randint(0, 99))
        return f"{random.uniform(0, 99):.{random.randint(1, 4)}f}"

    def generate(length: int) -> str:
        parts = [generate_operand()]
        for _ in range(length):
            parts.append(random.choice("+-*/"))
            parts.append(generate_operand())
        return " ".join(parts)

    while True:
        code = generate(random.randint(0, 6))

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, (int, float)) and isinstance(res_my, float) and math.isclose(res_my, res_py):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue  # both reject division by zero
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
