import pytest

from assigncalc.tokenizer import Token, TokenKind, tokenize, untokenize, untokenize_with_offsets


@pytest.mark.parametrize(
    "code, expected_tokens",
    [
        pytest.param("12.5", [Token(TokenKind.NUMBER, "12.5")]),
        pytest.param("x_1", [Token(TokenKind.IDENTIFIER, "x_1")]),
        pytest.param("=+", [Token(TokenKind.PUNCTUATION, "="), Token(TokenKind.OPERATOR, "+")]),
        pytest.param("#", []),
        pytest.param("", []),
        pytest.param("   \t\n", []),
        # no validation of number literals
        pytest.param("1.2.3", [Token(TokenKind.NUMBER, "1.2.3")]),
        pytest.param("2abc", [Token(TokenKind.NUMBER, "2"), Token(TokenKind.IDENTIFIER, "abc")]),
        pytest.param("ab12_c3", [Token(TokenKind.IDENTIFIER, "ab12_c3")]),
        # identifiers must start with a letter
        pytest.param("_x", [Token(TokenKind.IDENTIFIER, "x")]),
        pytest.param("a#b", [Token(TokenKind.IDENTIFIER, "a"), Token(TokenKind.IDENTIFIER, "b")]),
        pytest.param("π = 3", [
            Token(TokenKind.IDENTIFIER, "π"),
            Token(TokenKind.PUNCTUATION, "="),
            Token(TokenKind.NUMBER, "3"),
        ]),
        pytest.param("x = 3 + 4 * 2", [
            Token(TokenKind.IDENTIFIER, "x"),
            Token(TokenKind.PUNCTUATION, "="),
            Token(TokenKind.NUMBER, "3"),
            Token(TokenKind.OPERATOR, "+"),
            Token(TokenKind.NUMBER, "4"),
            Token(TokenKind.OPERATOR, "*"),
            Token(TokenKind.NUMBER, "2"),
        ]),
        pytest.param("{(-/)};", [
            Token(TokenKind.PUNCTUATION, "{"),
            Token(TokenKind.PUNCTUATION, "("),
            Token(TokenKind.OPERATOR, "-"),
            Token(TokenKind.OPERATOR, "/"),
            Token(TokenKind.PUNCTUATION, ")"),
            Token(TokenKind.PUNCTUATION, "}"),
            Token(TokenKind.PUNCTUATION, ";"),
        ]),
    ],
)
def test_tokenize(code: str, expected_tokens: list[Token]) -> None:
    assert tokenize(code) == expected_tokens


@pytest.mark.parametrize(
    "code",
    [
        "a_1=(2.5+b)*{c};",
        "  foo = 1 - 2 / 3 ; bar=4",
        "x9y_ = 007.5.",
    ],
)
def test_token_texts_reconstruct_input(code: str) -> None:
    tokens = tokenize(code)
    assert all(t.text for t in tokens)
    assert "".join(t.text for t in tokens) == "".join(code.split())


def test_tokenize_is_pure() -> None:
    code = "x = 3 + 4 * 2; y = w"
    assert tokenize(code) == tokenize(code)


def test_keyword_and_invalid_kinds_are_never_produced() -> None:
    tokens = tokenize("if x = 1 ; while ? @ $")
    assert {t.kind for t in tokens} <= {TokenKind.IDENTIFIER, TokenKind.PUNCTUATION, TokenKind.NUMBER}


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("x = ( 1 + 2 ) ;", "x = (1 + 2);"),
        pytest.param("a=1;b=2", "a = 1; b = 2"),
        pytest.param("{ y }", "{y}"),
    ],
)
def test_untokenize(code: str, expected: str) -> None:
    assert untokenize(tokenize(code)) == expected


@pytest.mark.parametrize(
    "code",
    [
        "x = ( 1 + 2 ) ;",
        "a = 1; x = }",
        "{ y } = 12.5",
    ],
)
def test_untokenize_offsets_point_at_tokens(code: str) -> None:
    tokens = tokenize(code)
    source, offsets = untokenize_with_offsets(tokens)
    assert len(offsets) == len(tokens)
    for token, offset in zip(tokens, offsets):
        assert source[offset : offset + len(token.text)] == token.text
