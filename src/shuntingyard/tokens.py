'''
Tokens of the infix grammar: numbers, the four binary operators, and
parentheses.

All tokens are immutable and compare by value, and by kind.
'''

from collections import namedtuple

from .printer import format_number


OPERATORS = '+-*/'

# Higher binds tighter. Ties are left associative.
PRECEDENCE = {
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
}


class Token:
    '''
    Mixin for the namedtuple token kinds.

    Plain tuple equality would have LeftParen() == RightParen().
    '''
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self))

    def isparen(self):
        return False


class Number(Token, namedtuple('Number', 'value')):
    __slots__ = ()

    def __str__(self):
        return format_number(self.value)


class Operator(Token, namedtuple('Operator', 'symbol')):
    __slots__ = ()

    def __new__(cls, symbol):
        if symbol not in PRECEDENCE:
            raise ValueError('Unknown operator {!r}'.format(symbol))
        return super().__new__(cls, symbol)

    @property
    def precedence(self):
        return PRECEDENCE[self.symbol]

    def __str__(self):
        return self.symbol


class LeftParen(Token, namedtuple('LeftParen', '')):
    __slots__ = ()

    def __str__(self):
        return '('

    def isparen(self):
        return True


class RightParen(Token, namedtuple('RightParen', '')):
    __slots__ = ()

    def __str__(self):
        return ')'

    def isparen(self):
        return True
