'''
Infix to postfix (RPN) conversion, with Dijkstra's shunting-yard algorithm.
'''

from enum import Enum

from .util import (MismatchedParentheses, UnaryMinusNotSupported,
                   OperatorInUnaryPosition)
from .tokens import Number, Operator, LeftParen, RightParen


class Previous(Enum):
    '''
    Category of the previously seen token.
    '''
    START = 'start'
    VALUE = 'value'
    OPERATOR = 'operator'
    LEFT_PAREN = 'left-paren'


# After any of these, an operator would have to be unary.
UNARY_POSITIONS = frozenset({Previous.START,
                             Previous.OPERATOR,
                             Previous.LEFT_PAREN})


class ShuntingYard:
    '''
    Converter for a single infix token sequence.

    Holds the output queue, the operator stack, and what came before.
    Use once; to_postfix() makes a new one for every call.
    '''

    def __init__(self):
        self.output = []
        self.stack = []
        self.previous = Previous.START

    def feed(self, token):
        '''
        Move one infix token to the output or the operator stack.
        '''
        if isinstance(token, Number):
            self.output.append(token)
            self.previous = Previous.VALUE
        elif isinstance(token, LeftParen):
            self.stack.append(token)
            self.previous = Previous.LEFT_PAREN
        elif isinstance(token, RightParen):
            self._close()
            self.previous = Previous.VALUE
        elif isinstance(token, Operator):
            self._operator(token)
            self.previous = Previous.OPERATOR
        else:
            raise TypeError('Not a token: {!r}'.format(token))

    def _close(self):
        '''
        Pop operators to the output until the matching left parenthesis.
        '''
        while self.stack:
            top = self.stack.pop()
            if isinstance(top, LeftParen):
                return
            self.output.append(top)
        raise MismatchedParentheses()

    def _operator(self, token):
        '''
        Pop operators that bind at least as tight, then stack this one.
        '''
        if self.previous in UNARY_POSITIONS:
            if token.symbol == '-':
                raise UnaryMinusNotSupported()
            raise OperatorInUnaryPosition(token.symbol)
        # >=, not >: ties pop, so everything is left associative.
        while (self.stack and
               isinstance(self.stack[-1], Operator) and
               self.stack[-1].precedence >= token.precedence):
            self.output.append(self.stack.pop())
        self.stack.append(token)

    def finish(self):
        '''
        Drain the operator stack and return the postfix sequence.
        '''
        while self.stack:
            top = self.stack.pop()
            if top.isparen():
                raise MismatchedParentheses()
            self.output.append(top)
        return self.output


def to_postfix(tokens):
    '''
    Reorder infix tokens into postfix, raising the first ParseError found.
    '''
    yard = ShuntingYard()
    for token in tokens:
        yard.feed(token)
    return yard.finish()
