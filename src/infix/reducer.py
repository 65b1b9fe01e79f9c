'''
Reduce a flat token list to a single tree by repeatedly collapsing runs that
match templates, one precedence tier at a time.
'''

from .arena import TokenList
from .template import (
    matches,
    PAREN_TEMPLATE,
    MUL_TEMPLATE, DIV_TEMPLATE,
    ADD_TEMPLATE, SUB_TEMPLATE,
    SHIFT_LEFT_TEMPLATE, SHIFT_RIGHT_TEMPLATE,
    POWER_TEMPLATE, MOD_TEMPLATE,
    UNARY_TEMPLATE,
)
from .token import Kind
from .util import ReduceError


class Reducer:
    '''
    Builds the tree of an expression out of its token list.

    Every pass walks the tiers below in order. Note shifts, then power and
    modulus, bind looser than addition and subtraction: 1 + 2 < 1 is 6.
    '''

    # (name, templates, TokenList method collapsing a match)
    TIERS = (
        ('parentheses', (PAREN_TEMPLATE,), TokenList.unwrap),
        ('multiplication/division', (MUL_TEMPLATE, DIV_TEMPLATE),
         TokenList.collapse),
        ('addition/subtraction', (ADD_TEMPLATE, SUB_TEMPLATE),
         TokenList.collapse),
        ('shift', (SHIFT_LEFT_TEMPLATE, SHIFT_RIGHT_TEMPLATE),
         TokenList.collapse),
        ('power/modulus', (POWER_TEMPLATE, MOD_TEMPLATE),
         TokenList.collapse),
        ('unary', (UNARY_TEMPLATE,), TokenList.unwrap_unary),
    )

    def reduce(self, tokens):
        '''
        Collapse tokens until one is left, and return it.

        Raise ReduceError if a whole pass over the tiers changes nothing.
        Each collapse removes at least one token, so this always terminates.
        '''
        if tokens.head.next is None:
            raise ReduceError('Empty expression')
        while tokens.root is None:
            if not self.reduce_pass(tokens):
                raise ReduceError('Could not reduce expression')
        root = tokens.root
        if root.kind is not Kind.VALUE and not root.reduced:
            raise ReduceError('Could not reduce expression')
        return root

    def reduce_pass(self, tokens):
        '''
        Run every tier once. Return the number of collapses made.
        '''
        return sum(self.sweep(tokens, templates, collapse)
                   for _, templates, collapse
                   in type(self).TIERS)

    def sweep(self, tokens, templates, collapse):
        '''
        Collapse, left to right, every run matching one of templates.

        Scanning resumes where a run was collapsed, so a fresh composite can
        immediately be the left operand of the next match.
        '''
        collapses = 0
        before = tokens.head
        while before.next is not None:
            if any(matches(before.next, template) for template in templates):
                before = collapse(tokens, before)
                collapses += 1
            else:
                before = before.next
        return collapses
