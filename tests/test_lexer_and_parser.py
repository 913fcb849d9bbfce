import pytest
from hypothesis import given, strategies as st

from kappa.errors import KappaSyntaxError
from kappa.reader.lexer import Lexer, lex
from kappa.reader.parser import Parser, parse
from kappa.reader.token import Token, TokenKind
from kappa.reader import token as tok
from kappa.types.nil import Nil, T
from kappa.types.symbol import Symbol


def _num(x):
    return Token(TokenKind.NUMBER, float(x))


def _lit(s):
    return Token(TokenKind.LITERAL, s)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [_lit("A")]),
        ("hello", [_lit("HELLO")]),
        ("(a b c)", [tok.LPAREN, _lit("A"), _lit("B"), _lit("C"), tok.RPAREN]),
        ('"hello"', [Token(TokenKind.STRING, "hello")]),
        ('"Mixed Case"', [Token(TokenKind.STRING, "Mixed Case")]),
        ("1", [_num(1)]),
        ("1.5", [_num(1.5)]),
        ("2.345", [_num(2.345)]),
        ("-10", [_num(-10)]),
        ("+7", [_num(7)]),
        ("- 10", [tok.MINUS, _num(10)]),
        ("(+ 1 2)", [tok.LPAREN, tok.PLUS, _num(1), _num(2), tok.RPAREN]),
        ("nil", [tok.NIL]),
        ("NiL", [tok.NIL]),
        ("t", [tok.TRUE]),
        ("  \t t", [tok.TRUE]),
        ("(t)", [tok.LPAREN, _lit("T"), tok.RPAREN]),
        ("t ", [_lit("T")]),
        ("abc1", [_lit("ABC"), _num(1)]),
        ("#", [Token(TokenKind.ILLEGAL, "#")]),
        ("　a", [_lit("A")]),  # unicode whitespace
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


def test_nested_arithmetic_tokens():
    lexer = Lexer("(+ (- 30 2) (* (/ 4 2) 3))")
    wants = [
        tok.LPAREN, tok.PLUS,
        tok.LPAREN, tok.MINUS, _num(30), _num(2), tok.RPAREN,
        tok.LPAREN, tok.ASTERISK,
        tok.LPAREN, tok.SLASH, _num(4), _num(2), tok.RPAREN,
        _num(3), tok.RPAREN,
        tok.RPAREN,
        tok.EOF,
    ]
    for i, want in enumerate(wants):
        got = lexer.next_token()
        assert got == want, f"unexpected token[{i}]: got={got!r}, want={want!r}"


def test_eof_is_repeated():
    lexer = Lexer("x")
    assert lexer.next_token() == _lit("X")
    for _ in range(3):
        assert lexer.next_token() == tok.EOF


def test_string_keeps_escapes_verbatim():
    assert list(lex(r'"a\"b" c')) == [Token(TokenKind.STRING, r'a\"b'), _lit("C")]


def test_unterminated_string_takes_rest():
    assert list(lex('"abc')) == [Token(TokenKind.STRING, "abc")]


def test_malformed_number_is_fatal():
    with pytest.raises(ValueError):
        list(lex("1.2.3"))


@pytest.mark.parametrize(
    "token,text",
    [
        (tok.PLUS, "+"),
        (tok.LPAREN, "("),
        (tok.EOF, "EOF"),
        (Token(TokenKind.ILLEGAL, "#"), "ILLEGAL(#)"),
        (_num(10), "10"),
        (_num(1.5), "1.5"),
        (_lit("ABC"), "ABC"),
    ]
)
def test_token_str(token, text):
    assert str(token) == text


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", Nil),
        ("t", T),
        ("123", 123.0),
        ("-45", -45.0),
        ("3.14", 3.14),
        ('"hello"', "hello"),
        ("hello", Symbol("HELLO")),
        ("+", Symbol("+")),
        ("(a b c)", [Symbol("A"), Symbol("B"), Symbol("C")]),
        ("(+ -10 5)", [Symbol("+"), -10.0, 5.0]),
        ("(* (/ 1 2) 3)", [Symbol("*"), [Symbol("/"), 1.0, 2.0], 3.0]),
        ("()", []),
        ("", Nil),
        (")", Nil),
    ]
)
def test_parser(source, expected):
    assert parse(source) == expected


def test_nested_lists():
    expected = [[Symbol("A"), Symbol("B")], [Symbol("C"), Symbol("D")]]
    assert parse("((a b) (c d))") == expected


def test_missing_close_paren_ends_at_eof():
    assert parse("(+ 1 (* 2 3") == [Symbol("+"), 1.0, [Symbol("*"), 2.0, 3.0]]


def test_nil_literal_kept_inside_list():
    assert parse("(a nil b)") == [Symbol("A"), Nil, Symbol("B")]


def test_illegal_token_raises():
    with pytest.raises(KappaSyntaxError, match="invalid token: #"):
        parse("(+ 1 #)")


def test_parse_all():
    stream = Parser(Lexer("(setq a 1) a ) 2"))
    assert list(stream.parse_all()) == [[Symbol("SETQ"), Symbol("A"), 1.0], Symbol("A"), 2.0]


@pytest.mark.parametrize(
    "source",
    [
        "(+ -10 5)",
        "(+ (* 1 2) 3)",
        "(+ (/ 2 (- 10 (* 1 1))))",
        "1",
        "hello",
        "(+ 1 2 (* 1 3))",
    ]
)
def test_parse_render_roundtrip(source):
    from kappa.printer import to_lisp_string
    assert to_lisp_string(parse(source)) == source.upper()


# -------------------------------
# Strategies
# -------------------------------
# No '.', so the number scanner never sees malformed text
source_strat = st.text(
    st.characters(exclude_characters=".", exclude_categories=("Cs",)),
    max_size=40,
)

symbol_strat = st.text(
    st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"),
    min_size=1, max_size=8,
).filter(lambda s: s.upper() not in ("NIL", "T"))


@given(source_strat)
def test_lexer_no_crash(source):
    tokens = list(lex(source))
    assert all(t.kind is not TokenKind.EOF for t in tokens)


@given(source_strat)
def test_parser_only_raises_syntax_errors(source):
    try:
        list(Parser(Lexer(source)).parse_all())
    except KappaSyntaxError:
        pass


@given(st.lists(symbol_strat, max_size=6))
def test_symbol_lists_parse_upper_cased(names):
    source = "(" + " ".join(names) + ")"
    assert parse(source) == [Symbol(n.upper()) for n in names]


@pytest.mark.parametrize("sep", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_information_separators_are_not_whitespace(sep):
    assert list(lex(sep + "a")) == [Token(TokenKind.ILLEGAL, sep), _lit("A")]


@pytest.mark.parametrize("space", ["\x85", "\xa0", " ", "　"])
def test_unicode_white_space_is_skipped(space):
    assert list(lex(space + "a")) == [_lit("A")]
