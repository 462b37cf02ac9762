from functools import reduce
import operator

import regex

from .util import (InvalidCharacter, ExpectedDigitAfterDecimalPoint,
                   InvalidNumberLiteral, wrap_user_errors)
from .tokens import OPERATORS, Number, Operator, LeftParen, RightParen


@wrap_user_errors(InvalidNumberLiteral)
def parse_number(literal, position):
    '''
    Convert number lexeme to a float.

    :param position: Where the lexeme started, for error reporting.
    '''
    return float(literal)


class Lexer:
    '''
    Lexer for the infix arithmetic *regular* grammar.

    Holds only the compiled grammar, so one instance can lex any number of
    texts.
    '''
    # ASCII only. \d would also accept other scripts' digits.
    DIGITS = r'[0-9]+'
    # Number, e.g. 1, 12, 1.5. Not .5. For 1. the fraction group matches
    # empty, which the lexer reports as an error.
    NUMBER = r'''
              {DIGITS}
              (?:
                  \.
                  (?<fraction>
                      [0-9]*
                  )
              )?
              '''.format(DIGITS=DIGITS)
    OPERATOR = r'[' + regex.escape(OPERATORS) + r']'
    # Not \s, which is also Unicode aware.
    SPACE = r'[\x20\t\n\r]+'

    # All possible lexemes.
    LEXEME = r'(?<space>' + SPACE + r')|' \
             r'(?<lparen>\()|' \
             r'(?<rparen>\))|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<number>' + NUMBER + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self):
        self.pattern = regex.compile(type(self).LEXEME, flags=type(self).FLAGS)

    def lex(self, text):
        '''
        Take text and yield all (token, position) pairs.

        Doesn't yield incomplete or incorrect tokens, raising on first bad.
        '''
        position = 0
        while position < len(text):
            match = self.pattern.match(text, position)
            if match is None:
                raise InvalidCharacter(text[position], position)
            yield from self._tokens(match)
            position = match.end()

    def _tokens(self, match):
        '''
        Yield the token for a lexeme match, if any. Space yields nothing.
        '''
        groups = self.matchedgroups(match)
        position = match.start()
        if 'lparen' in groups:
            yield LeftParen(), position
        elif 'rparen' in groups:
            yield RightParen(), position
        elif 'operator' in groups:
            yield Operator(groups['operator']), position
        elif 'number' in groups:
            if groups.get('fraction') == '':
                raise ExpectedDigitAfterDecimalPoint(position)
            yield Number(parse_number(groups['number'], position)), position

    def matchedgroups(self, match):
        '''
        Return the named groups that took part in the match.

        An empty fraction still took part, unlike an absent one.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value is not None}

    def tokenize(self, text):
        '''
        Return the list of all tokens in text.
        '''
        return [token for token, _ in self.lex(text)]


def tokenize(text):
    '''
    Split text into tokens, raising the first LexError found.
    '''
    return Lexer().tokenize(text)
