from collections import namedtuple

from .lexer import tokenize
from .yard import to_postfix
from .machine import eval_postfix


Result = namedtuple('Result', 'tokens postfix value')


def calculate(text):
    '''
    Run text through all three stages: tokenize, reorder, evaluate.

    Returns every stage's output. The first stage to fail raises, and later
    stages don't run.
    '''
    tokens = tokenize(text)
    postfix = to_postfix(tokens)
    value = eval_postfix(postfix)
    return Result(tokens, postfix, value)


def evaluate(text):
    return calculate(text).value
