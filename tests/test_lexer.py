'''
Infix lexer tests
'''

import regex

from infix.util import LexError
from infix.token import Kind

from pytest import raises


def kinds(tokens):
    return [token.kind for token in tokens]


def test_values_and_operators(lexer):
    tokens = lexer.tokenize('12 + 3')
    assert kinds(tokens) == [Kind.VALUE, Kind.ADD, Kind.VALUE]
    assert [token.value for token in tokens] == [12, 0, 3]


def test_every_operator(lexer):
    tokens = lexer.tokenize('+-*/<>^%()')
    assert kinds(tokens) == [Kind.ADD, Kind.SUB, Kind.MUL, Kind.DIV,
                             Kind.SHIFT_LEFT, Kind.SHIFT_RIGHT,
                             Kind.POWER, Kind.MOD,
                             Kind.PAREN_OPEN, Kind.PAREN_CLOSE]


def test_maximal_digit_run(lexer):
    tokens = lexer.tokenize('1234(5)')
    assert [token.value for token in tokens if token.kind is Kind.VALUE] \
        == [1234, 5]


def test_whitespace_skipped(lexer):
    assert len(lexer.tokenize('  1\t+   2 ')) == 3


def test_unsupported_token(lexer):
    with raises(LexError, match=regex.escape('Unsupported token: "&"')):
        lexer.tokenize('1 + 1 & 2')


def test_unsupported_token_aborts_scan(lexer):
    matches = lexer.lex('1 + x + 2')
    assert [m.group(0) for m in (next(matches), next(matches),
                                 next(matches), next(matches))] \
        == ['1', ' ', '+', ' ']
    with raises(LexError):
        next(matches)


def test_leading_unsupported_token_skipped(lexer):
    tokens = lexer.tokenize('&1 + 1')
    assert kinds(tokens) == [Kind.VALUE, Kind.ADD, Kind.VALUE]


def test_only_first_character_skipped(lexer):
    with raises(LexError, match=regex.escape('Unsupported token: "&"')):
        lexer.tokenize(' &1')
    with raises(LexError, match=regex.escape('Unsupported token: "$"')):
        lexer.tokenize('&$1')


def test_non_ascii_digits_rejected(lexer):
    with raises(LexError):
        lexer.tokenize('1 + \N{ARABIC-INDIC DIGIT THREE}')


def test_no_fractions(lexer):
    with raises(LexError, match=regex.escape('Unsupported token: "."')):
        lexer.tokenize('1.5')


def test_wide_literal_wraps(lexer):
    tokens = lexer.tokenize('18446744073709551616')
    assert [token.value for token in tokens] == [0]


def test_fresh_list_per_line(lexer):
    first = lexer.tokenize('1 + 1')
    second = lexer.tokenize('1 + 1')
    assert first is not second
    assert len(first) == len(second) == 3


def test_tokenize_appends(lexer):
    tokens = lexer.tokenize('1')
    assert lexer.tokenize('+ 2', tokens) is tokens
    assert kinds(tokens) == [Kind.VALUE, Kind.ADD, Kind.VALUE]
    assert tokens.tail.value == 2


def test_empty_line(lexer):
    assert len(lexer.tokenize('')) == 0
