from deskcalc.errors import CalculatorError
from deskcalc.session import evaluate
from deskcalc.symbols import SymbolTable
from deskcalc.tokenizer import tokenize
from deskcalc.utils import format_number

for code in [
    "5",
    "-1",
    "1 + 1",
    "- - 5",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "7/6/2000",
    "10 % 3",
    "2e3 + 2e",
    "x = 1; y = 2; z = x + y",
    "var = (1 + 14 * (54*54))",
    "a = b = 10; a + b",
    "pi * 2",
    "pi = 3",
    "1 / 0",
    "(1 + 2",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except CalculatorError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    symbols = SymbolTable()
    try:
        results = evaluate(code, symbols)
    except CalculatorError as e:
        print(f"error: {e}")
        continue
    results_str = "\n".join(f" {i + 1:> 2}: {format_number(res)}" for i, res in enumerate(results))
    print(f"statement results:\n{results_str}")
    print(f"variables: {symbols.variables}")
