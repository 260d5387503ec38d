import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class TokenKind(enum.Enum):
    NUMBER = enum.auto()
    IDENTIFIER = enum.auto()
    OPERATOR = enum.auto()
    PUNCTUATION = enum.auto()
    KEYWORD = enum.auto()  # reserved, never emitted
    INVALID = enum.auto()

    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return f"<{self.kind}>{self.text}"


OPERATOR_CHARS = frozenset("+-*/")
PUNCTUATION_CHARS = frozenset("(){}=;")


def _is_valid_in_number(s: str) -> bool:
    return s.isdecimal() or s == "."


def _is_valid_in_identifier(s: str) -> bool:
    return s.isalpha() or s.isdecimal() or s == "_"


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if code[i].isspace():
            pass
        elif code[i].isdecimal():
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_valid_in_number(code[number_end_idx]):
                number_end_idx += 1
            tokens.append(Token(kind=TokenKind.NUMBER, text=code[i:number_end_idx]))
            i = number_end_idx - 1  # to account for += 1 later
        elif code[i].isalpha():
            ident_end_idx = i + 1
            while ident_end_idx < len(code) and _is_valid_in_identifier(code[ident_end_idx]):
                ident_end_idx += 1
            tokens.append(Token(kind=TokenKind.IDENTIFIER, text=code[i:ident_end_idx]))
            i = ident_end_idx - 1
        elif code[i] in OPERATOR_CHARS:
            tokens.append(Token(kind=TokenKind.OPERATOR, text=code[i]))
        elif code[i] in PUNCTUATION_CHARS:
            tokens.append(Token(kind=TokenKind.PUNCTUATION, text=code[i]))
        else:
            logger.debug("Skipping unrecognized character %r at %d", code[i], i)
        i += 1

    return tokens


NO_SPACE_BEFORE = frozenset(";)}")
NO_SPACE_AFTER = frozenset("({")


def untokenize_with_offsets(tokens: list[Token]) -> tuple[str, list[int]]:
    """Renders tokens as source text, also returning where each token starts in it"""
    result = ""
    offsets: list[int] = []
    for i, token in enumerate(tokens):
        # ( 1 + 2 ) ; => (1 + 2);
        if i > 0 and token.text not in NO_SPACE_BEFORE and tokens[i - 1].text not in NO_SPACE_AFTER:
            result += " "
        offsets.append(len(result))
        result += token.text
    return result, offsets


def untokenize(tokens: list[Token]) -> str:
    return untokenize_with_offsets(tokens)[0]
