'''
Template matching tests
'''

from infix.token import Kind
from infix.template import (
    matches,
    ADD_TEMPLATE, MUL_TEMPLATE, PAREN_TEMPLATE, UNARY_TEMPLATE,
)


def test_binary(build):
    tokens = build(1, Kind.ADD, 2)
    assert matches(tokens.head.next, ADD_TEMPLATE)
    assert not matches(tokens.head.next, MUL_TEMPLATE)


def test_runs_out_of_tokens(build):
    tokens = build(1, Kind.ADD)
    assert not matches(tokens.head.next, ADD_TEMPLATE)


def test_ignores_rest_of_list(build):
    tokens = build(1, Kind.ADD, 2, Kind.MUL, 3)
    assert matches(tokens.head.next, ADD_TEMPLATE)


def test_reduced_matches_as_value(build):
    tokens = build(1, Kind.MUL, 2, Kind.ADD, 3)
    tokens.collapse(tokens.head)
    assert tokens.head.next.kind is Kind.MUL
    assert matches(tokens.head.next, ADD_TEMPLATE)


def test_parentheses(build):
    tokens = build(Kind.PAREN_OPEN, 1, Kind.PAREN_CLOSE)
    assert matches(tokens.head.next, PAREN_TEMPLATE)
    tokens = build(Kind.PAREN_OPEN, Kind.PAREN_CLOSE)
    assert not matches(tokens.head.next, PAREN_TEMPLATE)


def test_unary_whitelist(build):
    assert matches(build(Kind.SUB, 1).head.next, UNARY_TEMPLATE)
    assert matches(build(Kind.ADD, 1).head.next, UNARY_TEMPLATE)
    assert not matches(build(Kind.MUL, 1).head.next, UNARY_TEMPLATE)
    assert not matches(build(1, 1).head.next, UNARY_TEMPLATE)
    assert not matches(build(Kind.SUB, Kind.SUB).head.next, UNARY_TEMPLATE)


def test_reduced_operator_is_not_unary(build):
    tokens = build(1, Kind.SUB, 2, 5)
    tokens.collapse(tokens.head)
    assert tokens.head.next.kind is Kind.SUB
    assert not matches(tokens.head.next, UNARY_TEMPLATE)
