'''
Infix calculator.

Evaluates plain arithmetic over unsigned 64-bit integers: + - * / % for the
usual, < and > for bit shifts, ^ for power, parentheses for grouping. Results
are read back as signed, so 0 - 5 prints -5.

Expressions are lexed into a flat token list, which is reduced to a tree by
collapsing runs that match fixed templates, one precedence tier at a time:

1. ( )
2. * /
3. + -
4. < >
5. ^ %
6. prefix + -

Yes, shifts and power bind looser than addition here. 1 + 2 < 1 is 6.
'''

from .calculator import Calculator
from .cli import CLI
from .evaluator import Evaluator
from .lexer import Lexer
from .reducer import Reducer
from .util import InfixError, LexError, ReduceError, MathError, EngineError


__all__ = 'Calculator', 'Lexer', 'Reducer', 'Evaluator', 'CLI', \
          'InfixError', 'LexError', 'ReduceError', 'MathError', 'EngineError'
