from flatcalc.formatter import format_result
from flatcalc.parser import ParserError, parse
from flatcalc.runtime import CalcRuntimeError, EvaluationMode, evaluate
from flatcalc.tokenizer import tokenize

for code in [
    "5",
    ".",
    "1 + 1",
    "2 + 3 * 4",
    "2 * 3 + 4",
    "8 / 4 / 2",
    "8 - 4 - 2",
    "8 / 4 * 2",
    "8 - 4 + 2",
    "2 * 3 - 4 * 5",
    "1 / 4",
    "10 / 3",
    "5 / 0",
    "2 + x",
    "2 $ 3",
    "2 +",
    "",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    tokens = tokenize(code)
    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        expression = parse(tokens)
    except ParserError as e:
        print(e)
        continue
    print(f"expression: {expression}")

    for mode in EvaluationMode:
        try:
            result = evaluate(expression, mode=mode)
        except CalcRuntimeError as e:
            print(f" {mode:>8}: {e}")
            continue
        print(f" {mode:>8}: {format_result(result)}")
