from os import path
from sys import exit
import sys
from argparse import ArgumentParser, OPTIONAL
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import CalculatorError
from .lexer import Lexer, tokenize
from .yard import to_postfix
from .machine import eval_postfix
from .printer import format_number, format_tokens, format_postfix


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    history=self.history,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.shuntingyard_history'

    # (output label, error label, stage, output formatter), in pipeline order.
    STAGES = (
        ('Tokens:', 'Tokenizer error', tokenize, format_tokens),
        ('RPN:   ', 'Shunting Yard error', to_postfix, format_postfix),
        ('Result:', 'RPN eval error', eval_postfix, format_number),
    )

    def calculate(self, line):
        '''
        Run line through every stage, printing each stage's output.

        Stops at the first failing stage, and reports it. Return True if
        all stages succeeded.
        '''
        value = line
        for i, (label, error_label, stage, fmt) in enumerate(self.STAGES):
            try:
                value = stage(value)
            except CalculatorError as e:
                print('{}: {}'.format(error_label, e.args[0]),
                      file=sys.stderr)
                if self.args.verbose:
                    traceback.print_exc(file=sys.stderr)
                return False
            if not self.args.quiet:
                print(label, fmt(value))
            elif i == len(self.STAGES) - 1:
                print(fmt(value))
        return True

    def executor(self):
        '''
        Run calculator on the command line expression, or on each input line.
        '''
        if self.args.expression:
            # Shell splits "1 + 2" into three words. Glue them back.
            lines = [' '.join(self.args.expression)]
        else:
            lines = (line
                     for line
                     in self._prompting_input()
                     if line.strip(' \t\n\r'))
        failed = False
        for line in lines:
            if not self.calculate(line):
                failed = True
        return 1 if failed else 0

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)
        return 0

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty

        Else plain stdin.
        '''
        if self.args.prompt or sys.stdin.isatty() and sys.stdout.isatty():
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix calculator: tokenize, convert to RPN, evaluate',
            epilog='Without an expression, reads one expression per line.')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='show tracebacks of errors')
        self.argument_parser.add_argument('-q', '--quiet',
                                          action='store_true',
                                          help='print only the result')
        self.argument_parser.add_argument('-p', '--prompt',
                                          nargs=OPTIONAL,
                                          const=self.DEFAULT_PROMPT,
                                          help='prompt interactively')
        self.argument_parser.add_argument('-G', '--raw-grammar',
                                          action='store_const',
                                          const=self.raw_grammar,
                                          dest='action',
                                          help='print the lexer grammar')
        self.argument_parser.add_argument('expression',
                                          nargs='*',
                                          help='expression, e.g. "1 + 2 * 3"')
        self.argument_parser.set_defaults(action=self.executor)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or the process' command line args.

        Return exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expression and self.args.prompt:
            self.argument_parser.error('expression and --prompt are exclusive')
        try:
            return self.args.action()
        except KeyboardInterrupt:
            exit(1)


def main():
    exit(CLI().run())
