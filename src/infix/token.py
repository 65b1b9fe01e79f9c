from enum import Enum

from .util import to_signed


class Kind(Enum):
    VALUE = 'value'
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    SHIFT_LEFT = '<'
    SHIFT_RIGHT = '>'
    POWER = '^'
    MOD = '%'
    PAREN_OPEN = '('
    PAREN_CLOSE = ')'
    # Template-only: any operator that may be used as a prefix.
    UNARY_FUNCTION = 'unary'
    # Template-only: terminates a template.
    END = 'end'


# Single character lexemes and the kind each one becomes.
SYMBOLS = {
    kind.value: kind
    for kind
    in Kind
    if len(kind.value) == 1
}


class Token:
    '''
    Node of the flat token list, and later of the reduced tree.

    Leaves carry a value. Composites are operator tokens that reduction
    folded into a subtree; they carry their operands in left and right.
    '''

    __slots__ = 'kind', 'value', 'next', 'left', 'right', 'reduced'

    def __init__(self, kind, value=0):
        self.kind = kind
        self.value = value
        self.next = None
        self.left = None
        self.right = None
        # Once set, the token matches templates as a VALUE whatever its kind.
        self.reduced = False

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        if self.kind is None:
            return 'Token(head)'
        if self.kind is Kind.VALUE:
            return 'Token({}, {})'.format(self.kind.name, self.value)
        return 'Token({}{})'.format(self.kind.name,
                                    ', reduced' if self.reduced else '')

    def render(self, depth=0, indent='  '):
        '''
        Yield one indented line per node of the subtree, operators first.
        '''
        stack = [(self, depth)]
        while stack:
            token, depth = stack.pop()
            if token.is_leaf:
                yield indent * depth + str(to_signed(token.value))
                continue
            yield indent * depth + token.kind.value
            # Left child on top, so it comes out first.
            stack.append((token.right, depth + 1))
            stack.append((token.left, depth + 1))
