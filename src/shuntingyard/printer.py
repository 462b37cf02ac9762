'''
Render numbers and token sequences back to text, for diagnostics.
'''

from decimal import Decimal
import math


def format_number(number):
    '''
    Format number as an integer if it has no fractional part, else as the
    shortest decimal that reads back to the same float.

    Never uses exponent notation.
    '''
    if not math.isfinite(number):
        return repr(float(number))
    if number == math.trunc(number):
        return str(int(number))
    # repr() is the shortest round-tripping form, but may be 1e-07.
    return format(Decimal(repr(float(number))), 'f')


def format_tokens(tokens):
    '''
    Space separated infix tokens, parentheses included.
    '''
    return ' '.join(map(str, tokens))


def format_postfix(tokens):
    '''
    Space separated postfix tokens. Parentheses, if any, are skipped.
    '''
    return ' '.join(str(token)
                    for token
                    in tokens
                    if not token.isparen())
