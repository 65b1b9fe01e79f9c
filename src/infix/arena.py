from .token import Kind, Token
from .util import negate


class TokenList:
    '''
    The tokens of one expression, as a singly linked list behind a sentinel.

    Append-only while lexing. Reduction then collapses runs of tokens in
    place until a single tree root is left after the sentinel. Every
    collapsing method takes the token *before* the run and returns it, so a
    scan can resume at the collapse point.

    A list belongs to exactly one expression; make a new one for the next.
    '''

    def __init__(self):
        self.head = Token(None)
        self.tail = self.head

    def __iter__(self):
        token = self.head.next
        while token is not None:
            yield token
            token = token.next

    def __len__(self):
        return sum(1 for _ in self)

    def __repr__(self):
        return 'TokenList({})'.format(list(self))

    @property
    def root(self):
        '''
        The only token left, or None if there are none or several.
        '''
        first = self.head.next
        if first is None or first.next is not None:
            return None
        return first

    def append(self, kind, value=0):
        token = Token(kind, value)
        self.tail.next = token
        self.tail = token
        return token

    def _relink(self, before, combined, following):
        '''
        Put combined in place of everything between before and following.
        '''
        combined.next = following
        before.next = combined
        if following is None:
            self.tail = combined

    def collapse(self, before):
        '''
        Fold [operand, operator, operand] into the operator token.
        '''
        left = before.next
        combined = left.next
        right = combined.next
        following = right.next

        combined.reduced = True
        combined.left = left
        combined.right = right
        left.next = right.next = None
        self._relink(before, combined, following)
        return before

    def unwrap(self, before):
        '''
        Replace ( operand ) with the operand itself.
        '''
        opening = before.next
        inner = opening.next
        closing = inner.next
        following = closing.next

        inner.reduced = True
        opening.next = closing.next = None
        self._relink(before, inner, following)
        return before

    def unwrap_unary(self, before):
        '''
        Apply a prefix + or - to the operand following it.

        A leaf is negated in place and the operator dropped. A subtree has
        no stored value to negate, so - becomes the composite 0 - subtree.
        '''
        operator = before.next
        operand = operator.next
        following = operand.next

        if operator.kind is Kind.SUB and not operand.is_leaf:
            operator.reduced = True
            operator.left = Token(Kind.VALUE, 0)
            operator.right = operand
            operand.next = None
            self._relink(before, operator, following)
            return before

        if operator.kind is Kind.SUB:
            operand.value = negate(operand.value)
        operand.reduced = True
        operator.next = None
        self._relink(before, operand, following)
        return before
