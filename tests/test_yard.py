'''
Shunting-yard (infix to postfix) tests
'''

from shuntingyard.util import (MismatchedParentheses, UnaryMinusNotSupported,
                               OperatorInUnaryPosition, ParseError)
from shuntingyard.lexer import tokenize
from shuntingyard.yard import to_postfix, ShuntingYard, Previous
from shuntingyard.tokens import Number, Operator, LeftParen, RightParen

from pytest import raises


def postfix(text):
    return ' '.join(map(str, to_postfix(tokenize(text))))


def test_parens():
    tokens = [LeftParen(),
              Number(1.0),
              Operator('+'),
              Number(2.0),
              RightParen(),
              Operator('*'),
              Number(3.0)]
    assert to_postfix(tokens) == [Number(1.0),
                                  Number(2.0),
                                  Operator('+'),
                                  Number(3.0),
                                  Operator('*')]


def test_precedence():
    assert postfix('1 + 2 * 3') == '1 2 3 * +'
    assert postfix('1 * 2 + 3') == '1 2 * 3 +'
    assert postfix('1 - 6 / 3') == '1 6 3 / -'


def test_left_associative():
    assert postfix('8 - 3 - 2') == '8 3 - 2 -'
    assert postfix('1 + 2 - 3 + 4') == '1 2 + 3 - 4 +'


def test_left_associative_multiplicative():
    # Ties pop for * and / too.
    assert postfix('8 / 4 / 2') == '8 4 / 2 /'
    assert postfix('2 * 3 / 4') == '2 3 * 4 /'
    assert postfix('8 / 2 * 4') == '8 2 / 4 *'


def test_nested_parens():
    assert postfix('((1))') == '1'
    assert postfix('2 * (3 + (4 - 1))') == '2 3 4 1 - + *'
    assert postfix('(1 + 2) * (3 + 4)') == '1 2 + 3 4 + *'


def test_single_number():
    assert postfix('42') == '42'


def test_empty():
    assert to_postfix([]) == []


def test_length_without_parens():
    for text in '1 + 2', '(1 + 2) * 3', '((4)) / (2 - (1))', '1':
        tokens = tokenize(text)
        parens = [token for token in tokens if token.isparen()]
        assert len(to_postfix(tokens)) == len(tokens) - len(parens)


def test_unclosed_paren():
    with raises(MismatchedParentheses):
        to_postfix(tokenize('(1 + 2'))


def test_unopened_paren():
    with raises(MismatchedParentheses):
        to_postfix(tokenize('1 + 2)'))


def test_unopened_paren_after_group():
    with raises(MismatchedParentheses):
        to_postfix(tokenize('(1) + 2) * (3'))


def test_unary_minus_at_start():
    with raises(UnaryMinusNotSupported):
        to_postfix(tokenize('-3 + 1'))


def test_unary_minus_after_operator():
    with raises(UnaryMinusNotSupported):
        to_postfix(tokenize('1 * -3'))


def test_unary_minus_after_paren():
    with raises(UnaryMinusNotSupported):
        to_postfix(tokenize('2 * (-3)'))


def test_minus_after_right_paren_is_binary():
    assert postfix('(4) - 1') == '4 1 -'


def test_operator_in_unary_position():
    with raises(OperatorInUnaryPosition, match='unary position: \\+') as e:
        to_postfix(tokenize('+1'))
    assert e.value.symbol == '+'


def test_doubled_operator():
    with raises(OperatorInUnaryPosition) as e:
        to_postfix(tokenize('1 * / 2'))
    assert e.value.symbol == '/'
    assert isinstance(e.value, ParseError)


def test_operator_after_left_paren():
    with raises(OperatorInUnaryPosition):
        to_postfix(tokenize('(* 2)'))


def test_trailing_operator_converts():
    # Missing operands are the evaluator's business.
    assert postfix('1 +') == '1 +'


def test_not_a_token():
    with raises(TypeError):
        to_postfix(['1'])


def test_previous_category():
    yard = ShuntingYard()
    assert yard.previous is Previous.START
    yard.feed(LeftParen())
    assert yard.previous is Previous.LEFT_PAREN
    yard.feed(Number(1.0))
    assert yard.previous is Previous.VALUE
    yard.feed(Operator('+'))
    assert yard.previous is Previous.OPERATOR
    yard.feed(Number(2.0))
    yard.feed(RightParen())
    assert yard.previous is Previous.VALUE
    assert yard.finish() == [Number(1.0), Number(2.0), Operator('+')]


def test_fresh_state_per_call():
    with raises(MismatchedParentheses):
        to_postfix(tokenize('(1'))
    assert postfix('1 + 1') == '1 1 +'
