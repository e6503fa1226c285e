"""
Random statements checked against Python's eval.

Each random expression tree is printed twice: as calculator code with the
fewest parentheses precedence allows, and as fully parenthesized Python with
math.fmod standing in for '%'. Any disagreement means the calculator parsed
precedence or associativity differently from the tree.
"""

import math
import random

from deskcalc.session import evaluate

PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "%": 2}
VARIABLES = {"a": 3.0, "b": -1.5, "c": 0.0}
LEAVES = ["0", "1", "2", "7", "10", "0.5", "2.25", "pi", "e", *VARIABLES]


def generate(depth: int) -> tuple[str, str, int]:
    """(calculator code, python code, precedence of the top node)"""
    if depth == 0 or random.random() < 0.25:
        leaf = random.choice(LEAVES)
        return leaf, leaf, 3
    if random.random() < 0.15:
        code, py, prec = generate(depth - 1)
        if prec < 3:
            code = f"({code})"
        return f"-{code}", f"(-{py})", 3

    op = random.choice(list(PRECEDENCE))
    left_code, left_py, left_prec = generate(depth - 1)
    right_code, right_py, right_prec = generate(depth - 1)
    # operators are left-associative: equal precedence needs parentheses only on the right
    if left_prec < PRECEDENCE[op]:
        left_code = f"({left_code})"
    if right_prec <= PRECEDENCE[op]:
        right_code = f"({right_code})"
    py = f"fmod({left_py}, {right_py})" if op == "%" else f"({left_py} {op} {right_py})"
    return f"{left_code} {op} {right_code}", py, PRECEDENCE[op]


def eval_py(py: str) -> float | str:
    namespace = {"fmod": math.fmod, "pi": math.pi, "e": math.e, **VARIABLES}
    try:
        return float(eval(py, namespace))
    except (ZeroDivisionError, ValueError) as e:
        return str(e)


def eval_my(code: str) -> float | str:
    prelude = "".join(f"{name} = {value}; " for name, value in VARIABLES.items())
    try:
        return evaluate(prelude + code)[-1]
    except Exception as e:
        return str(e)


if __name__ == "__main__":
    while True:
        code, py, _ = generate(depth=4)
        res_py = eval_py(py)
        res_my = eval_my(code)
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, float) and isinstance(res_my, float):
            if math.isclose(res_my, res_py) or (math.isnan(res_my) and math.isnan(res_py)):
                continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
