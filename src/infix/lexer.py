from functools import reduce
import operator

import regex

from .arena import TokenList
from .token import Kind, SYMBOLS
from .util import LexError, wrap, wrap_user_errors


class Lexer:
    '''
    Lexer for infix arithmetic expressions.

    Holds no state between lines; each tokenize() fills a fresh TokenList
    unless one is handed in.
    '''
    # Unsigned decimal. No sign, no fraction: - is an operator.
    NUMBER = r'[0-9]+'
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, SYMBOLS)) + r')'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all lexemes.

        An unsupported character aborts the scan with a LexError, unless it
        is the very first character of the line, which is skipped.
        '''
        pattern = regex.compile(type(self).LEXEME, flags=type(self).FLAGS)
        position = 0
        while position < len(line):
            match = pattern.match(line, position)
            if match is None:
                if position == 0:
                    # Leading junk is ignored, not rejected.
                    position += 1
                    continue
                raise LexError('Unsupported token: "{}"'.format(
                    line[position]))
            yield match
            position = match.end()

    def kind(self, match):
        '''
        Return the token kind of a lexeme, or None for whitespace.
        '''
        groups = match.groupdict()
        if groups['number'] is not None:
            return Kind.VALUE
        elif groups['operator'] is not None:
            return SYMBOLS[groups['operator']]
        return None

    def tokenize(self, line, tokens=None):
        '''
        Append the tokens of line to tokens (a new TokenList by default).
        '''
        if tokens is None:
            tokens = TokenList()
        for match in self.lex(line):
            kind = self.kind(match)
            if kind is Kind.VALUE:
                tokens.append(kind, self._convert(match.group('number')))
            elif kind is not None:
                tokens.append(kind)
        return tokens

    @wrap_user_errors('Cannot convert {1}', LexError, ValueError)
    def _convert(self, number):
        '''
        Convert a decimal literal, wrapping it to 64 bits like every value.
        '''
        return wrap(int(number))
