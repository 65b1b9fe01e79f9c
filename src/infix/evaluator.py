import math
import operator

from .token import Kind
from .util import BITS, EngineError, MathError, wrap, wrap_user_errors


def _wrapping(f):
    '''
    Truncate the result of a binary operator to 64 bits.
    '''
    def wrapped(left, right):
        return wrap(f(left, right))
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


@wrap_user_errors('Division by zero: {0} / {1}', MathError, ZeroDivisionError)
def divide(left, right):
    return left // right


@wrap_user_errors('Division by zero: {0} % {1}', MathError, ZeroDivisionError)
def modulo(left, right):
    return left % right


def shift_left(left, right):
    # Everything is shifted out; also keeps huge counts from allocating.
    if right >= BITS:
        return 0
    return wrap(left << right)


@wrap_user_errors('Power overflow: {0} ^ {1}', MathError, OverflowError)
def float_power(base, exponent):
    '''
    Raise base to exponent in floating point and truncate back to 64 bits.

    Both operands go through a double, so results above 2**53 lose their low
    digits: 3 ^ 40 is not 3 ** 40. This is the intended behaviour.
    '''
    return wrap(int(math.pow(base, exponent)))


class Evaluator:
    '''
    Computes the unsigned 64-bit value of a reduced tree.
    '''

    OPERATIONS = {
        Kind.ADD: _wrapping(operator.__add__),
        Kind.SUB: _wrapping(operator.__sub__),
        Kind.MUL: _wrapping(operator.__mul__),
        Kind.DIV: divide,
        Kind.MOD: modulo,
        Kind.SHIFT_LEFT: shift_left,
        Kind.SHIFT_RIGHT: operator.__rshift__,
        Kind.POWER: float_power,
    }

    def solve(self, token):
        '''
        Evaluate the tree under token, children first, left before right.

        Walks with an explicit stack, so long chains such as 1 + 1 + ... are
        not limited by the interpreter's recursion depth.
        '''
        values = []
        # (token, whether its children are already on the stack)
        stack = [(token, False)]
        while stack:
            token, expanded = stack.pop()
            if token.is_leaf:
                values.append(token.value)
            elif expanded:
                right = values.pop()
                left = values.pop()
                values.append(self.operation(token)(left, right))
            else:
                stack.append((token, True))
                stack.append((token.right, False))
                stack.append((token.left, False))
        return values.pop()

    def operation(self, token):
        '''
        Return the function computing a composite token.
        '''
        try:
            return type(self).OPERATIONS[token.kind]
        except KeyError:
            raise EngineError('Unsupported operation: "{}"'.format(
                token.kind)) from None
