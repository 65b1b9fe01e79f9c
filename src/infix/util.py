from functools import wraps


# Width of every value the engine handles.
BITS = 64
MASK = (1 << BITS) - 1
SIGN_BIT = 1 << (BITS - 1)


class InfixError(Exception):
    '''
    Bad user input: the expression could not be lexed, reduced or computed.
    '''


class LexError(InfixError):
    pass


class ReduceError(InfixError):
    pass


class MathError(InfixError):
    pass


class EngineError(Exception):
    '''
    The engine broke one of its own invariants. Not the user's fault.
    '''


def wrap_user_errors(fmt, error=InfixError, catch=Exception):
    '''
    Decorator that converts low-level exceptions to user errors.

    Passes through InfixErrors. The message is formatted with the arguments
    of the wrapped call.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except InfixError:
                raise
            except catch as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator


def wrap(n):
    '''
    Truncate an integer to its unsigned 64-bit representation.
    '''
    return n & MASK


def negate(n):
    '''
    Two's-complement negation, wrapping around 2**64.
    '''
    return wrap(0 - n)


def to_signed(n):
    '''
    Reinterpret the bit pattern of an unsigned 64-bit value as signed.

    This is how results are shown: 0 - 5 is stored as 2**64 - 5 and read
    back as -5.
    '''
    n = wrap(n)
    if n & SIGN_BIT:
        return n - (1 << BITS)
    return n
