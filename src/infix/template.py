'''
Token templates, and matching them against a run of the token list.
'''

from .token import Kind


VALUE = Kind.VALUE
END = Kind.END

ADD_TEMPLATE = (VALUE, Kind.ADD, VALUE, END)
SUB_TEMPLATE = (VALUE, Kind.SUB, VALUE, END)
MUL_TEMPLATE = (VALUE, Kind.MUL, VALUE, END)
DIV_TEMPLATE = (VALUE, Kind.DIV, VALUE, END)
SHIFT_LEFT_TEMPLATE = (VALUE, Kind.SHIFT_LEFT, VALUE, END)
SHIFT_RIGHT_TEMPLATE = (VALUE, Kind.SHIFT_RIGHT, VALUE, END)
POWER_TEMPLATE = (VALUE, Kind.POWER, VALUE, END)
MOD_TEMPLATE = (VALUE, Kind.MOD, VALUE, END)
PAREN_TEMPLATE = (Kind.PAREN_OPEN, VALUE, Kind.PAREN_CLOSE, END)
UNARY_TEMPLATE = (Kind.UNARY_FUNCTION, VALUE, END)

# Operators that may also be used as a prefix.
UNARY_WHITELIST = frozenset({Kind.ADD, Kind.SUB})


def effective_kind(token):
    '''
    Kind a token matches as: anything already reduced is a value.
    '''
    if token.reduced:
        return VALUE
    return token.kind


def matches(token, template):
    '''
    Return True if the tokens starting at token fit template, slot by slot.

    Never looks past the run, and fails if the list ends first.
    '''
    for expected in template:
        if expected is END:
            return True
        if token is None:
            return False
        kind = effective_kind(token)
        if expected is Kind.UNARY_FUNCTION and kind in UNARY_WHITELIST:
            expected = kind
        if kind is not expected:
            return False
        token = token.next
    return True
