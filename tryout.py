from assigncalc.parser import parse
from assigncalc.runtime import format_outcome
from assigncalc.tokenizer import tokenize

for code in [
    "y = 5",
    "x = 3 + 4 * 2",
    "a = 10 / 4 - 1",
    "b = 1.5 * 2; c = 7",
    "z = w",
    "5 = 3",
    "x 5",
    "x = ",
    "v = 1.2.3",
    "n = 1 / 0",
    "q = 2 # 3",
    "x_1 = 10 - 2 - 3",
]:
    print("=" * 10)
    print(f"code: {code!r}")

    tokens = tokenize(code)
    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    outcomes = parse(tokens)
    outcomes_str = "\n".join(f" {i + 1:> 2}: {format_outcome(o)}" for i, o in enumerate(outcomes))
    print(f"outcomes:\n{outcomes_str}")
