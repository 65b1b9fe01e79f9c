from pytest import fixture

from infix.arena import TokenList
from infix.calculator import Calculator
from infix.lexer import Lexer
from infix.token import Kind


@fixture
def calculator() -> Calculator:
    return Calculator()


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def build():
    '''
    Build a TokenList from kinds, with ints standing for values.

    No lexer involved, so tests of the later stages stay independent of it.
    '''
    def build(*items) -> TokenList:
        tokens = TokenList()
        for item in items:
            if isinstance(item, Kind):
                tokens.append(item)
            else:
                tokens.append(Kind.VALUE, item)
        return tokens
    return build
