from functools import wraps

from .printer import format_number


class CalculatorError(Exception):
    pass


class LexError(CalculatorError):
    '''
    Text couldn't be split into tokens.
    '''


class InvalidCharacter(LexError):
    def __init__(self, char, position):
        super().__init__('Invalid character {!r} at position {}'.format(char, position))
        self.char = char
        self.position = position


class ExpectedDigitAfterDecimalPoint(LexError):
    def __init__(self, position):
        super().__init__('Expected digit after decimal point in number at position {}'.format(position))
        self.position = position


class InvalidNumberLiteral(LexError):
    def __init__(self, literal, position):
        super().__init__('Invalid number {!r} at position {}'.format(literal, position))
        self.literal = literal
        self.position = position


class ParseError(CalculatorError):
    '''
    Tokens don't form a well formed infix expression.
    '''


class MismatchedParentheses(ParseError):
    def __init__(self):
        super().__init__('Mismatched parentheses')


class UnaryMinusNotSupported(ParseError):
    def __init__(self):
        super().__init__('Unary minus not supported')


class OperatorInUnaryPosition(ParseError):
    def __init__(self, symbol):
        super().__init__('Operator in unary position: {}'.format(symbol))
        self.symbol = symbol


class EvaluationError(CalculatorError):
    '''
    Postfix tokens couldn't be reduced to a single number.
    '''


class EmptyExpression(EvaluationError):
    def __init__(self):
        super().__init__('Empty expression')


class StackUnderflow(EvaluationError):
    def __init__(self, symbol):
        super().__init__('Stack underflow: less than 2 elements on stack for {}'.format(symbol))
        self.symbol = symbol


class DivisionByZero(EvaluationError):
    def __init__(self):
        super().__init__('Division by zero')


class LeftoverStackItems(EvaluationError):
    def __init__(self, stack):
        super().__init__('Leftover stack items: [{}]'.format(
            ' '.join(map(format_number, stack))))
        self.stack = list(stack)


def wrap_user_errors(error):
    '''
    Decorator that converts unexpected exceptions to the given error.

    Passes through CalculatorErrors. The wrapped function's arguments are
    passed on to the error's constructor.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalculatorError:
                raise
            except Exception as e:
                raise error(*args, **kwargs) from e
        return wrapper
    return decorator
