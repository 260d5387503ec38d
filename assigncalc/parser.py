import enum
import logging
import math
import operator
from dataclasses import dataclass
from typing import Callable, Union

from assigncalc.tokenizer import Token, TokenKind, untokenize_with_offsets

logger = logging.getLogger(__name__)


class DiagnosticKind(enum.Enum):
    UNEXPECTED_TOKEN = "Unexpected token"
    EXPECTED_ASSIGN = "Expected '='"
    VARIABLE_NOT_SUPPORTED = "Variable not supported"
    INVALID_EXPRESSION = "Invalid expression"

    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def _caret_lines(tokens: list[Token], error_token_idx: int) -> list[str]:
    source, offsets = untokenize_with_offsets(tokens)
    column = offsets[error_token_idx] if error_token_idx < len(offsets) else len(source)
    return [source, " " * column + "^"]


@dataclass
class ParserError(Exception):
    kind: DiagnosticKind
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        return "\n".join([f"Parse error: {self.kind.value}", *_caret_lines(self.tokens, self.error_token_idx)])


@dataclass(frozen=True)
class Assignment:
    name: str
    value: float


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    tokens: tuple[Token, ...]
    token_idx: int

    @property
    def message(self) -> str:
        return self.kind.value

    def pointer(self) -> str:
        """Source line with a caret under the offending token"""
        return "\n".join(_caret_lines(list(self.tokens), self.token_idx))


Outcome = Union[Assignment, Diagnostic]

ADDITIVE_OPS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
}


def _divide(a: float, b: float) -> float:
    # IEEE-754 semantics instead of ZeroDivisionError
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


MULTIPLICATIVE_OPS: dict[str, Callable[[float, float], float]] = {
    "*": operator.mul,
    "/": _divide,
}

END_OF_INPUT = Token(kind=TokenKind.INVALID, text="")
STATEMENT_END = ";"


class Parser:
    """Recursive descent parser evaluating expressions as it recognizes them.

    The cursor (``pos`` and ``current``) only moves forward through ``_advance``.
    ``pos`` is the index of the token following ``current``.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0
        self.current = END_OF_INPUT

    @property
    def current_idx(self) -> int:
        return self.pos - 1 if self.current is not END_OF_INPUT else len(self.tokens)

    def parse(self) -> list[Outcome]:
        outcomes: list[Outcome] = []
        self._advance()
        while self.current.kind is not TokenKind.INVALID:
            try:
                outcomes.append(self._statement())
            except ParserError as e:
                logger.debug("Diagnostic %s at token %d", e.kind, e.error_token_idx)
                outcomes.append(Diagnostic(kind=e.kind, tokens=tuple(e.tokens), token_idx=e.error_token_idx))
                self._synchronize()
        return outcomes

    def _advance(self) -> None:
        if self.pos < len(self.tokens):
            self.current = self.tokens[self.pos]
            self.pos += 1
        else:
            self.current = END_OF_INPUT

    def _synchronize(self) -> None:
        while self.current.kind is not TokenKind.INVALID:
            skipped = self.current
            self._advance()
            if skipped.kind is TokenKind.PUNCTUATION and skipped.text == STATEMENT_END:
                break

    def _error(self, kind: DiagnosticKind) -> ParserError:
        return ParserError(kind, tokens=self.tokens, error_token_idx=self.current_idx)

    def _statement(self) -> Assignment:
        if self.current.kind is not TokenKind.IDENTIFIER:
            raise self._error(DiagnosticKind.UNEXPECTED_TOKEN)
        name = self.current.text
        self._advance()
        if self.current.text != "=":
            raise self._error(DiagnosticKind.EXPECTED_ASSIGN)
        self._advance()
        value = self._expression()
        if self.current.kind is TokenKind.PUNCTUATION and self.current.text == STATEMENT_END:
            self._advance()
        logger.debug("Assign %s = %r", name, value)
        return Assignment(name=name, value=value)

    def _expression(self) -> float:
        result = self._term()
        while self.current.kind is TokenKind.OPERATOR and self.current.text in ADDITIVE_OPS:
            op = ADDITIVE_OPS[self.current.text]
            self._advance()
            result = op(result, self._term())
        return result

    def _term(self) -> float:
        result = self._factor()
        while self.current.kind is TokenKind.OPERATOR and self.current.text in MULTIPLICATIVE_OPS:
            op = MULTIPLICATIVE_OPS[self.current.text]
            self._advance()
            result = op(result, self._factor())
        return result

    def _factor(self) -> float:
        if self.current.kind is TokenKind.NUMBER:
            try:
                result = float(self.current.text)
            except ValueError:
                logger.debug("Malformed number %r, using 0", self.current.text)
                result = 0.0
            self._advance()
            return result
        elif self.current.kind is TokenKind.IDENTIFIER:
            raise self._error(DiagnosticKind.VARIABLE_NOT_SUPPORTED)
        else:
            raise self._error(DiagnosticKind.INVALID_EXPRESSION)


def parse(tokens: list[Token]) -> list[Outcome]:
    return Parser(tokens).parse()
