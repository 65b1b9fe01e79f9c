from .evaluator import Evaluator
from .lexer import Lexer
from .reducer import Reducer
from .util import to_signed


class Calculator:
    '''
    Infix calculator over 64-bit integers.

    Ties lexer, reducer and evaluator together. Every expression gets its
    own token list, thrown away once the result is known, so nothing carries
    over from one expression to the next.
    '''

    def __init__(self, lexer=None, reducer=None, evaluator=None):
        self.lexer = lexer or Lexer()
        self.reducer = reducer or Reducer()
        self.evaluator = evaluator or Evaluator()

    def parse(self, line):
        '''
        Lex and reduce line into a tree; return its root.
        '''
        tokens = self.lexer.tokenize(line)
        return self.reducer.reduce(tokens)

    def compute(self, line):
        '''
        Return the unsigned 64-bit value of line.
        '''
        return self.evaluator.solve(self.parse(line))

    def evaluate(self, line):
        '''
        Return the value of line, read as a signed 64-bit integer.
        '''
        return to_signed(self.compute(line))
