from io import StringIO
import sys

from pytest import Item, fixture

from shuntingyard.lexer import Lexer


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, for auditing a run of the calculator tests.

    Only called with enable_assertion_pass_hook set. Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def feed_stdin(monkeypatch):
    '''
    Replace the CLI's stdin with the given text.
    '''
    def feed(text: str) -> None:
        monkeypatch.setattr(sys, 'stdin', StringIO(text))
    return feed
