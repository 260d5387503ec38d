from assigncalc.config import Config
from assigncalc.parser import Assignment, Diagnostic, Outcome, parse
from assigncalc.tokenizer import tokenize


def evaluate(code: str) -> list[Outcome]:
    return parse(tokenize(code))


def format_outcome(outcome: Outcome, precision: int = 6) -> str:
    if isinstance(outcome, Assignment):
        return f"Assign {outcome.name} = {outcome.value:.{precision}f}"
    elif isinstance(outcome, Diagnostic):
        return f"Parse error: {outcome.message}"
    else:
        raise TypeError(f"Unexpected outcome type: {outcome!r}")


def run(code: str, config: Config) -> list[str]:
    lines: list[str] = []
    for outcome in evaluate(code):
        lines.append(format_outcome(outcome, precision=config.precision))
        if config.verbose and isinstance(outcome, Diagnostic):
            lines.append(outcome.pointer())
    return lines
