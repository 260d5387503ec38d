import math
import random
import string
import warnings

from assigncalc.parser import Assignment
from assigncalc.runtime import evaluate, format_outcome

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return float(eval(code))
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    outcomes = evaluate(f"x = {code}")
    if len(outcomes) == 1 and isinstance(outcomes[0], Assignment):
        return outcomes[0].value
    return "; ".join(format_outcome(o) for o in outcomes)


if __name__ == "__main__":

    def generate_number() -> str:
        integer = str(random.randint(1, 999))
        if random.random() < 0.3:
            return integer + "." + "".join(random.choices(string.digits, k=random.randint(1, 3)))
        return integer

    def generate(length: int) -> str:
        parts = [generate_number()]
        for _ in range(length - 1):
            parts.append(random.choice("+-*/"))
            parts.append(generate_number())
        return " ".join(parts)

    while True:
        code = generate(random.randint(1, 6))

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, float) and isinstance(res_my, float) and math.isclose(res_my, res_py):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
