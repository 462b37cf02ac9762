from collections import deque
import operator

from .util import (EmptyExpression, StackUnderflow, DivisionByZero,
                   LeftoverStackItems)
from .tokens import Number, Operator


def _divide(left, right):
    '''
    True division, refusing to produce inf or nan.
    '''
    if right == 0.0:
        raise DivisionByZero()
    return operator.__truediv__(left, right)


class Machine:
    '''
    Arithmetic stack machine.

    Takes postfix tokens and runs them. Numbers are stacked; operators pop
    their two operands and stack the result.
    '''

    # Arithmetic operators on the items of a machine.
    BUILTINS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': _divide,
    }

    def __init__(self):
        '''
        Create empty stack machine.
        '''
        self.stack = deque()

    def feed(self, token):
        '''
        Stack or run a postfix token on machine.
        '''
        if isinstance(token, Number):
            self._pshstack(token.value)
        elif isinstance(token, Operator):
            self._apply(token)
        else:
            raise TypeError('Not a postfix token: {!r}'.format(token))

    def _apply(self, token):
        '''
        Apply operator to the two topmost elements of the stack.
        '''
        if len(self.stack) < 2:
            raise StackUnderflow(token.symbol)
        # If you don't reverse, you'll do 2 - 9 when you say 9 2 -.
        right, left = self._popstack(2)
        self._pshstack(type(self).BUILTINS[token.symbol](left, right))

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        return [self.stack.pop() for _ in range(n)]

    def result(self):
        '''
        Return the only element left on the stack.
        '''
        if len(self.stack) != 1:
            raise LeftoverStackItems(self.stack)
        return self.stack[-1]

    def run(self, tokens):
        '''
        Feed all postfix tokens, and return the result.
        '''
        if not tokens:
            raise EmptyExpression()
        for token in tokens:
            self.feed(token)
        return self.result()


def eval_postfix(tokens):
    '''
    Evaluate postfix tokens on a fresh machine.
    '''
    return Machine().run(list(tokens))
