'''
Infix arithmetic calculator.

Text is split into tokens, the tokens are reordered into postfix (reverse
Polish notation) with the shunting-yard algorithm, and the postfix
sequence is run on a stack machine.

Supports + - * / on floats, and parentheses. Deliberately no unary minus:
-3 + 1 is an error, write 0 - 3 + 1.
'''

from .calculator import Result, calculate, evaluate
from .cli import CLI
from .lexer import Lexer, tokenize
from .machine import Machine, eval_postfix
from .printer import format_number, format_tokens, format_postfix
from .tokens import Number, Operator, LeftParen, RightParen
from .util import CalculatorError
from .yard import ShuntingYard, to_postfix


__all__ = ('calculate', 'evaluate', 'Result',
           'tokenize', 'to_postfix', 'eval_postfix',
           'format_number', 'format_tokens', 'format_postfix',
           'Number', 'Operator', 'LeftParen', 'RightParen',
           'CalculatorError',
           'Lexer', 'ShuntingYard', 'Machine', 'CLI')
